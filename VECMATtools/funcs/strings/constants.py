##############################################################################
# Global constants
##############################################################################

# characters that make up a number when parsing; everything else separates
DIGITS = "0123456789"

# rendering
OPEN_BRACKET = "["
CLOSE_BRACKET = "]"
ELEMENT_SEPARATOR = ", "
ROW_SEPARATOR = ","
ROW_INDENT = "  "

# float elements are printed like a default C++ output stream
FLOAT_FORMAT = "g"
