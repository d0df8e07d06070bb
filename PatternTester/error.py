# error.py
"""""
Exception types and error codes shared by the pattern engine and the UI.

The detectors themselves never let these escape: they are raised inside the
evaluator and caught again where a failure means "not numeric" or "no match".
Only the dispatch by key, the configuration layer and the UI surface them.
"""""


class MathError(Exception):
    def __init__(self, message, code="9999", equation=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.equation = equation

class CalculationError(MathError):
    pass

class PatternError(MathError):
    pass

class ConfigError(MathError):
    pass



Error_Dictionary = {

    "3" : "Expression Error",
    "4" : "UI Error",
    "5" : "Configuration Error",
    "9" : "Runtime Error"

}

#Error Messages are structured in:
# 1. Digit: Main Error
# 2. Digit: Sub-category
# 3. and 4. Digit: Error Number



ERROR_MESSAGES = {
    "3004" : "Invalid Operator: ", # + operator
    "3005" : "Identifier has no numeric value: ", # + identifier
    "3030" : "Unknown pattern: ", # + pattern key


    "4002" : "Check already Running!",
    "4501" : "Not all Settings could be saved: ", # + error
    "5001" : "Invalid setting value: ", # + setting


    "9999" : "Unexpected Error: " #+error
}
