class ApiError(Exception):
    """Error rendered to the client as a JSON body."""

    status_code = 500
    error_code = 'InternalError'

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {'error_code': self.error_code, 'message': self.message}


class BadInput(ApiError):
    status_code = 400
    error_code = 'BadInput'


class InvalidRequestBody(ApiError):
    status_code = 400
    error_code = 'InvalidRequestBody'


class ConfigError(ValueError):
    pass
