class TOTPError(ValueError):
    """
    Base class for all errors raised while generating a one-time password.
    """


class InvalidTimeStep(TOTPError):
    def __init__(self, time_step: int) -> None:
        self.time_step = time_step
        super().__init__("time step must be greater than 0, got {}".format(time_step))


class InvalidDigits(TOTPError):
    def __init__(self, digits: int) -> None:
        self.digits = digits
        super().__init__("digits must be greater than 0, got {}".format(digits))


class UnsupportedAlgorithm(TOTPError):
    def __init__(self, algorithm: object) -> None:
        self.algorithm = algorithm
        super().__init__("Algorithm '{}' not supported, must be SHA1, SHA256 or SHA512".format(algorithm))


class EmptySecret(TOTPError):
    def __init__(self) -> None:
        super().__init__("secret is mandatory and must not be empty")


class InvalidCounter(TOTPError):
    def __init__(self, counter: int) -> None:
        self.counter = counter
        super().__init__("counter must fit in 8 unsigned bytes, got {}".format(counter))
