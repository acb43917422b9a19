class MockPromptStore:
    """Serves one fixed prompt text for every module/version."""

    def __init__(self, text: str = 'mock prompt') -> None:
        self._text = text
        self.requests: list[tuple[str, str]] = []

    def get_prompt(self, *, module: str, version: str) -> str:
        self.requests.append((module, version))
        return self._text
