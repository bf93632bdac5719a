"""
# Exposes &library.Test to pytest as the `test` fixture.
"""
import pytest
from . import library

@pytest.fixture
def test(request):
	t = library.Test(request.node.name, request.function)
	with t.sealed():
		yield t
