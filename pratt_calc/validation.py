from .types import ExpBase


class EmptyType:
    __slots__ = ()

    def __bool__(self):
        return False

    def __repr__(self):
        return "Empty"


Empty = EmptyType()


class Arg:
    __slots__ = ("name", "default", "validator")

    def __init__(self, name, default=Empty, *, validator=None):
        self.name = name
        self.default = default
        self.validator = validator

    def __call__(self, _key, value):
        return self.validate(value)

    def validate(self, value):
        if value is Empty:
            if self.default is Empty:
                raise ValidateError(f"Missing value for argument {self.name}")
            return self.default
        try:
            return self.validator(self.name, value) if self.validator else value
        except ValidateError as exc:
            exc.add_note(f"while validating argument {self.name}")
            raise

    @classmethod
    def integer(cls, name, default=Empty):
        return cls(name, default=default, validator=ValidateArg.validate_integer)

    @classmethod
    def divisor(cls, name):
        return cls(name, validator=ValidateArg.validate_divisor)


class ValidateError(Exception):
    pass


class NegativeExponentError(ValidateError):
    pass


class FactorialRangeError(ValidateError):
    pass


class DivisionByZeroError(ValidateError):
    pass


class ValidateArg:
    # 20! is the largest factorial that fits in a signed 64 bit integer.
    MAX_FACTORIAL = 20

    @staticmethod
    def validate_integer(idx, val):
        # bool is an int subclass but never a valid operand.
        if not isinstance(val, int) or isinstance(val, bool):
            if isinstance(val, ExpBase):
                raise ValidateError(
                    f"Expected evaluated integer argument at {idx}, got unevaluated {val!r}"
                )
            raise ValidateError(f"Expected integer argument at {idx}, got {type(val)}")
        return val

    @classmethod
    def validate_exponent(cls, idx, val):
        val = cls.validate_integer(idx, val)
        if val < 0:
            raise NegativeExponentError(
                f"Integer cannot be raised to negative power {val} (argument {idx})"
            )
        return val

    @classmethod
    def validate_divisor(cls, idx, val):
        val = cls.validate_integer(idx, val)
        if val == 0:
            raise DivisionByZeroError(f"Division by zero (argument {idx})")
        return val

    @classmethod
    def validate_factorial(cls, idx, val):
        val = cls.validate_integer(idx, val)
        if val < 0:
            raise FactorialRangeError(
                f"Factorial of negative number {val} is undefined (argument {idx})"
            )
        if val > cls.MAX_FACTORIAL:
            raise FactorialRangeError(
                f"Factorial of {val} overflows a 64 bit integer, maximum is {cls.MAX_FACTORIAL} (argument {idx})"
            )
        return val


__all__ = (
    "Arg",
    "DivisionByZeroError",
    "Empty",
    "FactorialRangeError",
    "NegativeExponentError",
    "ValidateArg",
    "ValidateError",
)
