


class MathError(Exception):
    def __init__(self, message, code="9999", equation=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.equation = equation


class InvalidExpression(MathError):
    def __init__(self, detail, equation=None):
        super().__init__(f"The entered expression is invalid: {detail}", code="3001", equation=equation)
        self.detail = detail


class DivideByZero(MathError):
    def __init__(self, equation=None):
        super().__init__("Cannot divide by zero", code="3003", equation=equation)


class CalculationError(MathError):
    pass


class ArgumentError(MathError):
    pass





Error_Dictionary = {

    "1" : "Missing Files",
    "2" : "Fibonacci Error",
    "3" : "Calculator Error",
    "4" : "UI Error",
    "5" : "Configuration Error",
    "9" : "Runtime Error"

}

#Error Messages are structured in:
# 1. Digit: Main Error
# 2. Digit: Specification
# 3. and 4. Digit: Error Number



ERROR_MESSAGES = {
    "2001" : "Invalid Fibonacci argument: ", # + argument

    "3001" : "Invalid expression: ", # + token or triple
    "3003" : "Division by Zero",
    "3026" : "Expression nested too deeply.",

    "4002" : "Calculation already Running!",
    "4501" : "Not all Settings could be saved: ", # + Error raising setting

    "9999" : "Unexpected Error: " #+error
}
