class MazeError(Exception):
    pass


class PathValidationError(MazeError):
    code = 'invalid_path'

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class EmptyPath(PathValidationError):
    code = 'empty_path'


class WrongExit(PathValidationError):
    code = 'wrong_exit'


class IllegalMove(PathValidationError):
    code = 'illegal_move'


class LoopDetected(PathValidationError):
    code = 'loop_detected'


class WrongEntry(PathValidationError):
    code = 'wrong_entry'


class MazeFormatError(MazeError):
    pass


class FileOpenFailure(MazeFormatError):
    pass


class InconsistentRowLength(MazeFormatError):
    pass


class InvalidCharacter(MazeFormatError):
    pass


class MalformedSolutionFormat(MazeFormatError):
    pass


class SearchCancelled(MazeError):
    pass
