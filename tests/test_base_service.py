"""
BaseService contract tests.
"""

import pytest

from app.services.base_service import BaseService


def test_base_service_is_abstract():
    with pytest.raises(TypeError):
        BaseService()


def test_subclass_must_implement_handle():
    class IncompleteService(BaseService):
        pass

    with pytest.raises(TypeError):
        IncompleteService()


def test_handle_accepts_variadic_arguments():
    class EchoService(BaseService):
        def handle(self, *args):
            return list(args)

    service = EchoService()

    assert service.handle() == []
    assert service.handle("a", 1, None) == ["a", 1, None]
