class LrcError(ValueError):
    pass


class InvalidTimeError(LrcError):
    pass


class InvalidPrecisionError(LrcError):
    pass


class InvalidOptionError(LrcError):
    pass
