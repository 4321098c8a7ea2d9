from shopappstore.core.errors import ErrorKind, HttpError, ResourceError, ShopAppstoreError, TransportError


def test_from_http_error_maps_known_status():
    err = ResourceError.from_http_error(HttpError("bad", status_code=409, response="locked"))
    assert err.kind is ErrorKind.OBJECT_LOCKED
    assert err.body == "locked"
    assert "locked" in str(err)


def test_from_http_error_falls_back_to_communication():
    err = ResourceError.from_http_error(HttpError("Service returned 502", status_code=502))
    assert err.kind is ErrorKind.COMMUNICATION
    assert err.status_code == 502
    assert str(err) == "Service returned 502"


def test_transport_error_exposes_http_cause():
    http_error = HttpError("x", status_code=400)
    try:
        raise TransportError("failed") from http_error
    except TransportError as exc:
        assert exc.http_error is http_error

    assert TransportError("plain").http_error is None


def test_hierarchy():
    assert issubclass(ResourceError, ShopAppstoreError)
    assert issubclass(TransportError, ShopAppstoreError)
