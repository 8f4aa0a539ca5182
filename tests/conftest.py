"""Pytest configuration and shared fixtures."""
import asyncio
import io
import itertools

import pytest
from rich.console import Console

from csvchat.provider import AnswerProvider, AnswerRequest
from csvchat.session import MessageClock, SessionState
from csvchat.upload import CsvDocument


class FakeProvider(AnswerProvider):
    """Answer provider returning canned answers (or raising canned errors).

    When ``gate`` is set, each call waits for it before answering.
    """

    def __init__(self, answers=None, gate: asyncio.Event | None = None):
        self._answers = list(answers or ["# Answer\n\nDone."])
        self.gate = gate
        self.requests: list[AnswerRequest] = []
        self.started = asyncio.Event()
        self.closed = False

    async def answer(self, request: AnswerRequest) -> str:
        self.requests.append(request)
        self.started.set()
        if self.gate is not None:
            await self.gate.wait()
        result = self._answers.pop(0) if len(self._answers) > 1 else self._answers[0]
        if isinstance(result, BaseException):
            raise result
        return result

    async def close(self) -> None:
        self.closed = True


def _render_text(renderables, width: int = 100) -> str:
    console = Console(record=True, width=width, file=io.StringIO(), color_system=None)
    for renderable in renderables:
        console.print(renderable)
    return console.export_text()


@pytest.fixture
def render_text():
    """Return a function printing renderables to a recording console as plain text."""
    return _render_text


@pytest.fixture
def sample_csv_text():
    """Return a small sales CSV."""
    return (
        "region,product,revenue\n"
        "North,Widget,1200\n"
        "South,Widget,950\n"
        "East,Gadget,1730\n"
        "West,Gadget,400\n"
    )


@pytest.fixture
def csv_document(sample_csv_text):
    """Return a loaded CSV document."""
    return CsvDocument(name="sales.csv", text=sample_csv_text)


@pytest.fixture
def clock():
    """Clock whose wall time advances one second per read."""
    seconds = itertools.count(1_700_000_000)
    return MessageClock(source=lambda: float(next(seconds)))


@pytest.fixture
def session(csv_document, clock):
    """Session with a CSV loaded and no messages."""
    return SessionState(clock=clock, document=csv_document)


@pytest.fixture
def sample_document():
    """Return an assistant document using every block kind."""
    return '''# Sales Analysis

## Key Findings

- **East** leads with the highest revenue
- West trails the other regions

## Data Visualization

```chart
{
  "type": "bar",
  "chartData": [
    {"name": "North", "value": 1200},
    {"name": "South", "value": 950},
    {"name": "East", "value": 1730},
    {"name": "West", "value": 400}
  ],
  "options": {"title": "Revenue by Region"}
}
```

## Detailed Analysis

| Region | Revenue | Share |
|:-------|--------:|:-----:|
| North | $1,200.00 | 28.29% |
| East | $1,730.00 | 40.80% |

```python
df.groupby("region")["revenue"].sum()
```

## Suggested Follow-up Questions

1. Which product sells best in the East?
'''


@pytest.fixture
def fake_provider():
    """Return the FakeProvider class for building canned providers."""
    return FakeProvider
