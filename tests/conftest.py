import io

import pytest

from tinybasic.interpreter import Interpreter


class Session:
    """Interpreter wired to an in-memory output and a scripted INPUT source."""

    def __init__(self, inputs=(), max_steps=1000):
        self.out = io.StringIO()
        self.inputs = list(inputs)
        self.prompts = []
        self.interp = Interpreter(output=self.out, input_fn=self._read, max_steps=max_steps)

    def _read(self, prompt):
        self.prompts.append(prompt)
        if not self.inputs:
            raise EOFError
        return self.inputs.pop(0)

    def feed(self, *lines):
        for line in lines:
            self.interp.feed(line)
        return self

    def output(self):
        return self.out.getvalue()


@pytest.fixture
def session():
    return Session()


@pytest.fixture
def make_session():
    return Session
