import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import bento_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from bento_toolkit.core.models import ContentItem, SizeClass  # noqa: E402


# Common test fixtures
@pytest.fixture
def make_item():
    """Factory for content items with neutral defaults."""
    def _make(
        item_id: str = "t1",
        size: SizeClass = SizeClass.COMPACT,
        priority: float = 5,
        rating: float = 4,
        text: str = "Reliable service and friendly staff.",
        attribution: str = "Example Co",
    ) -> ContentItem:
        return ContentItem(
            id=item_id,
            text=text,
            rating=rating,
            priority=priority,
            size_class=size,
            attribution=attribution,
        )
    return _make


@pytest.fixture
def mixed_items(make_item):
    """Factory for n items cycling through every size class."""
    cycle = [SizeClass.TALL, SizeClass.WIDE, SizeClass.COMPACT, SizeClass.COMPACT]

    def _make(n: int) -> list[ContentItem]:
        return [
            make_item(f"item{i}", cycle[i % len(cycle)], priority=1 + (i * 7) % 10)
            for i in range(n)
        ]
    return _make


@pytest.fixture
def payload() -> dict:
    """Valid upstream payload with canonical keys."""
    return {
        "id": "t1",
        "text": "Cut our delivery time by 30%.",
        "rating": 5,
        "priority": 8,
        "sizeClass": "wide",
        "attribution": "Northwind Traders",
    }
