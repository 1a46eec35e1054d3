"""Shared pytest fixtures for jvmsig tests."""

import pytest
from dotenv import load_dotenv
from hypothesis import settings

from jvmsig.core.config import reload_config
from jvmsig.signatures import ClassInfo

# Load environment variables from .env file
load_dotenv()

# Configure hypothesis for property-based testing
settings.register_profile("ci", max_examples=100, deadline=None)
settings.register_profile("dev", max_examples=20, deadline=None)
settings.load_profile("dev")


@pytest.fixture(autouse=True)
def fresh_config():
    """Drop the cached configuration around every test."""
    reload_config()
    yield
    reload_config()


@pytest.fixture
def generic_method_signature() -> str:
    """A method signature using every grammar feature."""
    return (
        "<T:Ljava/lang/Object;U::Ljava/lang/Comparable<-TU;>;>"
        "(TT;[[ILjava/util/Map<TU;+Ljava/util/List<*>;>;)"
        "Ljava/util/Map$Entry<TT;TU;>.Inner<Ljava/lang/String;>;"
        "^Ljava/io/IOException;^TT;"
    )


@pytest.fixture
def class_info() -> ClassInfo:
    """Class context for a generic container class."""
    return ClassInfo(
        "com.example.Box",
        "<E:Ljava/lang/Object;>Ljava/lang/Object;Ljava/lang/Iterable<TE;>;",
    )
