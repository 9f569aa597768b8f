class RC5Error(ValueError):
    """ Base class for every error raised by the RC5 modules """


class ConfigurationError(RC5Error):
    """ Unsupported cipher parameters (word width, round count, key length) """


class SizeMismatchError(RC5Error):
    """ Key or block with the wrong number of bytes """
