class AppError(Exception):
    """Error the API answers with a {"message": ...} body and its own status"""

    def __init__(self, message, status_code=500):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class NotFoundError(AppError):
    def __init__(self, message="Resource not found"):
        super().__init__(message, 404)
