"""Domain errors raised by the service layer.

Each error knows the HTTP status it maps to; the global handlers in
core.error_handlers turn them into JSON responses.
"""


class EmployeeServiceError(Exception):
    code = "EMPLOYEE_ERROR"
    http_status = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict:
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "status": self.http_status,
            }
        }


class EmployeeNotFound(EmployeeServiceError):
    code = "EMPLOYEE_NOT_FOUND"
    http_status = 404

    def __init__(self, employee_id: int, message: str | None = None):
        super().__init__(message or f"Employee not found with ID: {employee_id}")
        self.employee_id = employee_id


class EmailAlreadyExists(EmployeeServiceError):
    code = "EMAIL_ALREADY_EXISTS"
    http_status = 409

    def __init__(self, email: str):
        super().__init__(f"Email already exists: {email}")
        self.email = email
