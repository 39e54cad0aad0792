"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DuplicateEntityError(Exception):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class AuthenticationError(Exception):
    """Raised when a login attempt does not match a stored user."""

    def __init__(self, email: str, reason: str = "Invalid credentials"):
        self.email = email
        self.reason = reason
        super().__init__(reason)


class CardNotFoundError(Exception):
    """Raised when a public card link resolves to nothing.

    Covers both an unknown id without payload and an undecodable portable
    payload. Terminal: callers show "not found" and do not retry.
    """

    def __init__(self, card_id: str, reason: str = "Card not found"):
        self.card_id = card_id
        self.reason = reason
        super().__init__(f"{reason}: '{card_id}'")


class LLMProviderError(Exception):
    """Raised when a generative-model provider returns an error."""

    def __init__(self, provider: str, status_code: int, message: str):
        self.provider = provider
        self.status_code = status_code
        self.message = message
        super().__init__(f"[{provider}] {status_code}: {message}")
