UNITS = [
    "",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
    "ten",
    "eleven",
    "twelve",
    "thirteen",
    "fourteen",
    "fifteen",
    "sixteen",
    "seventeen",
    "eighteen",
    "nineteen",
]
# "fourty" is a known misspelling, kept for compatibility with existing output.
# Only the leading digit is named: 123 -> "one hundred", 47 -> "fourty".
TENS = [
    "",
    "",
    "twenty",
    "thirty",
    "fourty",
    "fifty",
    "sixty",
    "seventy",
    "eighty",
    "ninety",
]
SCALE_TIERS = (
    (1000, "thousand"),
    (100, "hundred"),
)
NUMBER_LIMIT = 10_000


class UnitNameRetriever:
    def get_name(self, unit):
        raise NotImplementedError


class TableUnitNameRetriever(UnitNameRetriever):
    def __init__(self, names=None):
        names = list(UNITS if names is None else names)
        if len(names) != len(UNITS):
            raise ValueError(
                f"names must have exactly {len(UNITS)} entries, got {len(names)}."
            )
        self.names = names

    def get_name(self, unit):
        if not 0 <= unit < len(self.names):
            raise ValueError(f"unit must be in [0, {len(self.names) - 1}], got {unit}.")
        return self.names[unit]


class _CallableRetriever(UnitNameRetriever):
    def __init__(self, func):
        self.func = func

    def get_name(self, unit):
        return self.func(unit)


def _as_retriever(retriever):
    if isinstance(retriever, type):
        raise TypeError(
            f"retriever must be an instance, got the class {retriever.__name__}."
        )
    if hasattr(retriever, "get_name"):
        return retriever
    if callable(retriever):
        return _CallableRetriever(retriever)
    raise TypeError(
        "retriever must have a get_name method or be a callable taking a unit."
    )


class NumberToNameConverter:
    def __init__(self, retriever):
        self.retriever = _as_retriever(retriever)

    def _check(self, number):
        if isinstance(number, bool) or not isinstance(number, int):
            raise TypeError(f"number must be an int, got {type(number).__name__}.")
        if number < 0 or number >= NUMBER_LIMIT:
            raise ValueError(f"number must be in [0, {NUMBER_LIMIT - 1}], got {number}.")

    def _scaled_name(self, number, divisor, word):
        unit_name = self.retriever.get_name(number // divisor)
        return f"{unit_name} {word}"

    def get_name(self, number):
        self._check(number)
        for divisor, word in SCALE_TIERS:
            if number >= divisor:
                return self._scaled_name(number, divisor, word)
        if number < len(UNITS):
            return self.retriever.get_name(number)
        return TENS[number // 10]


_DEFAULT_CONVERTER = NumberToNameConverter(TableUnitNameRetriever())


def number_to_name(value):
    return _DEFAULT_CONVERTER.get_name(value)


def supported_values():
    values = list(range(1, len(UNITS)))
    values.extend(tens * 10 for tens in range(2, len(TENS)))
    for divisor, _ in reversed(SCALE_TIERS):
        values.extend(digit * divisor for digit in range(1, 10))
    return values


def is_supported(value):
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    if value <= 0 or value >= NUMBER_LIMIT:
        return False
    if value < len(UNITS):
        return True
    for divisor in [divisor for divisor, _ in SCALE_TIERS] + [10]:
        if value >= divisor:
            return value % divisor == 0
    return False
