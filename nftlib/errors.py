from typing import List, Optional


class NftError(Exception):
    pass


class UnsupportedOperationError(NftError):
    """ The operation makes no sense for the given parameters (eg. a v6 set in an `ip` table) """
    pass


class NftExecutionError(NftError):
    def __init__(self, message: str, *, args_list: Optional[List[str]] = None, returncode: Optional[int] = None, stderr: str = ""):
        self.args_list = args_list
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(message)


class InvalidResponseError(NftError):
    pass


class MissingFieldError(NftError):
    pass


class NotFoundError(MissingFieldError):
    """ Nothing in the listing matched the query """
    pass
