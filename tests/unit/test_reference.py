import httpx
import pytest

from fetshub.core import reference
from fetshub.core.assistant import TextAssistant


def test_sop_sections_are_listed_in_order() -> None:
    ids = [section.id for section in reference.list_sops()]
    assert ids[0] == reference.DEFAULT_SOP_ID
    assert "emergency" in ids
    assert len(ids) == len(set(ids))


def test_get_sop_unknown_is_none() -> None:
    section = reference.get_sop("checkin")
    assert section is not None
    assert section.steps
    assert reference.get_sop("nope") is None


def test_resources_lookup_by_name() -> None:
    names = [resource.name for resource in reference.list_resources()]
    assert len(names) == 4
    prometric = reference.get_resource("Prometric")
    assert prometric is not None
    assert not prometric.is_internal
    internal = reference.get_resource("FETS")
    assert internal is not None
    assert internal.is_internal
    assert reference.get_resource("Unknown") is None


@pytest.mark.asyncio
async def test_internal_resource_has_no_live_updates() -> None:
    def handler(_: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    assistant = TextAssistant("key", transport=httpx.MockTransport(handler))
    internal = reference.get_resource("FETS")
    assert internal is not None
    assert await reference.resource_updates(internal, assistant) is None
