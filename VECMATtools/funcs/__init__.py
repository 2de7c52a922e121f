"""
VECMATtools operation packages: vector, matrix and strings.
"""
