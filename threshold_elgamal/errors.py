class ThresholdElGamalError(Exception):
    """Base class for every error raised by this package."""


class RandomnessUnavailable(ThresholdElGamalError):
    def __init__(self, message):
        self.message = f"Secure random source failed. {message}"
        super().__init__(self.message)


class ParameterGenerationExhausted(ThresholdElGamalError):
    def __init__(self, what, attempts):
        self.attempts = attempts
        self.message = f"Gave up sampling {what} after {attempts} attempts."
        super().__init__(self.message)


class InvalidParameters(ThresholdElGamalError):
    def __init__(self, message):
        self.message = f"Invalid group parameters. {message}"
        super().__init__(self.message)


class NonInvertibleDifference(ThresholdElGamalError, ValueError):
    def __init__(self, message):
        self.message = f"Interpolation points are not usable. {message}"
        super().__init__(self.message)


class IndexNamespaceError(ThresholdElGamalError, ValueError):
    pass


class ReconstructionMismatch(ThresholdElGamalError):
    def __init__(self, message):
        self.message = f"Key combination self-check failed. {message} Abort."
        super().__init__(self.message)


class MessageOutOfRange(ThresholdElGamalError, ValueError):
    def __init__(self, message_int, p):
        self.message = f"Message integer must lie in [0, p) but has {message_int.bit_length()} bits against a {p.bit_length()}-bit p."
        super().__init__(self.message)
