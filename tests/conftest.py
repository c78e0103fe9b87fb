"""
Pytest configuration and fixtures for tikka tests.
"""

import pytest


@pytest.fixture
def sample_documents():
    """Provide a small corpus for building count tables."""
    return [
        "the cat sat on the mat",
        "the dog sat",
    ]


@pytest.fixture
def empty_counts():
    """Create a zero-filled table with two tokens and three indices."""
    from tikka import TokenCounts
    return TokenCounts(['apple', 'pear'], num_indices=3)


@pytest.fixture
def document_counts(sample_documents):
    """Create a token-by-document table from the sample corpus."""
    from tikka import TokenCounts
    return TokenCounts.from_documents(sample_documents)
