from sweethttp import ContentType, HTTPHeader, HTTPHeaders, HTTPMethod, Request


def test_header_subscript() -> None:
    request = Request(method="GET", url="http://www.example.com")
    request.headers.accept = ContentType.XML
    request.headers.accept = ContentType.JSON
    assert request.header_fields == {"Accept": "application/json"}
    assert request.headers.accept == ContentType.JSON
    request.headers.accept = None
    assert request.header_fields == {}


def test_headers() -> None:
    request = Request(method="GET", url="http://www.example.com")
    request.headers.accept = ContentType.JSON
    request.headers.content_type = ContentType.XML
    request.headers.authorization = "Bearer xyz"
    assert request.header_fields == {
        "Content-Type": "application/xml",
        "Authorization": "Bearer xyz",
        "Accept": "application/json",
    }
    assert request.headers.accept == ContentType.JSON
    assert request.headers.content_type == ContentType.XML
    assert request.headers.authorization == "Bearer xyz"


def test_missing_headers_are_none() -> None:
    headers = HTTPHeaders({})
    assert headers.accept is None
    assert headers.content_type is None
    assert headers.authorization is None
    assert headers[HTTPHeader.USER_AGENT] is None


def test_removal_leaves_other_keys() -> None:
    fields = {"Accept": "text/html", "X-Trace": "1", "accept": "lower"}
    headers = HTTPHeaders(fields)
    headers.accept = None
    assert fields == {"X-Trace": "1", "accept": "lower"}


def test_empty_value_removes_key() -> None:
    fields = {"Authorization": "Basic abc"}
    HTTPHeaders(fields).authorization = ""
    assert fields == {}


def test_unknown_content_type_accepted() -> None:
    headers = HTTPHeaders()
    headers.content_type = ContentType("application/vnd.example+json")
    assert headers.fields == {"Content-Type": "application/vnd.example+json"}
    headers.accept = "text/x-custom"
    assert headers.accept == ContentType("text/x-custom")


def test_subscript_by_header_and_string() -> None:
    headers = HTTPHeaders()
    headers[HTTPHeader.USER_AGENT] = "sweethttp"
    headers["X-Request-Id"] = "42"
    assert headers["User-Agent"] == "sweethttp"
    assert HTTPHeader.USER_AGENT in headers
    assert "X-Request-Id" in headers
    assert len(headers) == 2
    del headers[HTTPHeader.USER_AGENT]
    assert dict(headers) == {"X-Request-Id": "42"}
    assert headers == {"X-Request-Id": "42"}


def test_replace_headers_drops_stale_keys() -> None:
    request = Request(
        method="GET",
        url="http://www.example.com",
        header_fields={"Accept": "text/html", "X-Old": "1"},
    )
    replacement = HTTPHeaders({})
    replacement.content_type = ContentType.JSON
    request.headers = replacement
    assert request.header_fields == {"Content-Type": "application/json"}


def test_replace_headers_with_mapping() -> None:
    request = Request.build(HTTPMethod.POST, "http://www.example.com", {"a": "1"})
    request.headers = {"Authorization": "Bearer t"}
    assert request.header_fields == {"Authorization": "Bearer t"}
    request.headers = {}
    assert request.header_fields == {}


def test_replace_with_copy_of_own_headers() -> None:
    request = Request(method="GET", url="http://www.example.com", header_fields={"Accept": "text/html"})
    headers = HTTPHeaders(dict(request.header_fields))
    headers.authorization = "Bearer t"
    request.headers = headers
    assert request.header_fields == {"Accept": "text/html", "Authorization": "Bearer t"}
    request.headers = request.headers
    assert request.header_fields == {"Accept": "text/html", "Authorization": "Bearer t"}


def test_add_header_fields_is_union() -> None:
    request = Request(method="GET", url="http://www.example.com", header_fields={"A": "1"})
    request.add_header_fields({"B": "2"})
    assert request.header_fields == {"A": "1", "B": "2"}
    request.set_header(HTTPHeader("A"), None)
    assert request.header_fields == {"B": "2"}


def test_get_and_to_dict() -> None:
    headers = HTTPHeaders({"Accept": "text/html"})
    assert headers.get(HTTPHeader.ACCEPT) == "text/html"
    assert headers.get(HTTPHeader.COOKIE, "none") == "none"
    assert headers.to_dict() == {"Accept": "text/html"}
    assert headers.to_dict() is not headers.fields
    assert list(headers.items()) == [("Accept", "text/html")]


def test_overwrite_leaves_other_keys() -> None:
    fields = {"X-Trace": "1", "Accept": "text/html"}
    headers = HTTPHeaders(fields)
    headers.accept = ContentType.JSON
    assert fields == {"X-Trace": "1", "Accept": "application/json"}


def test_replace_with_empty_value_removes_key() -> None:
    request = Request(method="GET", url="http://www.example.com", header_fields={"Accept": "text/html"})
    request.headers = {"Accept": "", "X-Trace": "1"}
    assert request.header_fields == {"X-Trace": "1"}
    request.set_header("X-Trace", "")
    assert request.header_fields == {}
