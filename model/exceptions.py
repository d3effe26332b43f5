class InvalidField(Exception):
    def __init__(self, field: str, reason: str):
        super().__init__(f"Invalid {field}: {reason}")
        self.field = field
        self.reason = reason


class InvalidPlayer(Exception):
    pass


class NotFound(Exception):
    def __init__(self, id: int):
        super().__init__(f"Player {id} not found")
        self.id = id
