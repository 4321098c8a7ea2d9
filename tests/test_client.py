from shopappstore.core.models import SUBSCRIBERS, ResourceList
from shopappstore.sdk.client import ShopClient
from shopappstore.sdk.config import SdkConfig


class EchoTransport:
    def __init__(self):
        self.calls = None

    def bulk_request(self, calls):
        self.calls = calls
        items = [{"id": call["id"], "code": 200, "body": {"list": [call["name"]], "count": 1}} for call in calls]
        return {"headers": {"Code": 200}, "data": {"items": items}}


def test_client_get_many_uses_injected_transport():
    transport = EchoTransport()
    client = ShopClient(config=SdkConfig(), transport=transport)
    result = client.get_many({"s": SUBSCRIBERS.limit(10)})
    assert result == {"s": ResourceList(items=["subscribers"], count=1)}
    assert transport.calls == [{"id": "s", "name": "subscribers", "params": {"limit": 10}}]


def test_client_get_single_resource():
    client = ShopClient(config=SdkConfig(), transport=EchoTransport())
    assert client.get(SUBSCRIBERS).items == ["subscribers"]


def test_client_applies_overrides():
    client = ShopClient(entrypoint="https://x.example", token="t", config=SdkConfig(), transport=EchoTransport())
    assert client.config.entrypoint == "https://x.example"
    assert client.config.token == "t"
