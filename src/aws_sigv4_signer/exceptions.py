class SigningError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        if self.__cause__ is not None:
            return f"{self.message}: {self.__cause__}"
        return self.message


class CredentialsError(SigningError):
    def __init__(self, message: str = "Unable to resolve AWS credentials"):
        super().__init__(message)
