"""
Tests for cause chain traversal
"""

import logging

from causeway.errors import Chain, MessageError


class TestChainWalk:
    """Walking source() links"""

    def test_includes_head(self, build_chain):
        root = build_chain("a", "b", "c")
        assert [e.message() for e in Chain(root)] == ["a", "b", "c"]

    def test_causes_of_excludes_root(self, build_chain):
        root = build_chain("a", "b", "c")
        assert [e.message() for e in Chain.causes_of(root)] == ["b", "c"]

    def test_no_source_gives_empty_causes(self):
        causes = Chain.causes_of(MessageError("alone"))
        assert list(causes) == []
        assert not causes

    def test_none_head_is_empty(self):
        assert list(Chain(None)) == []

    def test_restartable(self, build_chain):
        chain = Chain(build_chain("a", "b"))
        assert list(chain) == list(chain)

    def test_last_is_root_cause(self, build_chain):
        assert Chain(build_chain("a", "b", "c")).last().message() == "c"


class TestChainBound:
    """Cyclic chains are truncated"""

    def test_cycle_truncated_at_max_depth(self, cyclic_error):
        assert len(list(Chain(cyclic_error, max_depth=5))) == 5

    def test_truncation_logged(self, cyclic_error, caplog):
        with caplog.at_level(logging.WARNING, logger="causeway.errors.chain"):
            list(Chain(cyclic_error, max_depth=3))
        assert "truncated after 3 links" in caplog.text

    def test_default_depth_from_environment(self, cyclic_error, monkeypatch):
        monkeypatch.setenv("CAUSEWAY_MAX_CHAIN_DEPTH", "7")
        assert len(list(Chain(cyclic_error))) == 7

    def test_short_chain_not_truncated(self, build_chain, caplog):
        with caplog.at_level(logging.WARNING):
            assert len(list(Chain(build_chain("a", "b"), max_depth=2))) == 2
        assert "truncated" not in caplog.text
