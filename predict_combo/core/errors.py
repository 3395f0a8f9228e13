class PredictComboError(ValueError):
    """Base class for every input error the predictor reports."""


class ParseError(PredictComboError):
    pass


class RangeError(PredictComboError):
    pass


class InvalidInputError(PredictComboError):
    pass
