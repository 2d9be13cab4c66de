import dataclasses

import pytest

from rplogout import AuthorizationServerContext


def test_issuer():
    context = AuthorizationServerContext(issuer="https://provider.test")
    assert context.issuer == "https://provider.test"

    with pytest.raises(dataclasses.FrozenInstanceError):
        context.issuer = "https://other.test"


@pytest.mark.parametrize(
    "issuer",
    [
        "",
        None,
        "provider.test",
        "https://provider.test/#fragment",
        "https://user@provider.test",
    ],
)
def test_invalid_issuer(issuer):
    with pytest.raises(ValueError, match="issuer"):
        AuthorizationServerContext(issuer=issuer)


def test_contexts_are_independent():
    first = AuthorizationServerContext(issuer="https://provider.test")
    second = AuthorizationServerContext(issuer="https://tenant.provider.test")
    assert first != second
    assert first.issuer == "https://provider.test"
