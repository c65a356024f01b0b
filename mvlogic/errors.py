class MVLogicError(Exception):
    """ Base class of all errors raised by mvlogic """

class ConfigurationError(MVLogicError):
    """ The inputs of a generation call cannot be used (e.g. the alphabet cannot be enumerated) """

class EmptyOperatorSetError(ConfigurationError):
    """ An internal node is required but there are no operators to choose from """

class NullaryOperatorError(ConfigurationError):
    """ An operator of arity 0 would be placed at an internal node without being allowed to """

class ArityError(MVLogicError, ValueError):
    """ A syntax tree node does not have as many children as its operator requires """
