"""Unit tests for svg2cetz.engine.context."""

from svg2cetz.engine.context import ROOT, ContextFrame, ContextStack
from svg2cetz.geometry.transform import Transform
from svg2cetz.svg.style import Style


class TestContextStack:
    """Tests for the frame stack."""

    def test_root_frame_carries_root_transform(self) -> None:
        """The stack starts with one root frame holding the caller's transform."""
        root_transform = Transform(0.01, 0.0, 0.0, -0.01, 0.0, 0.0)
        stack = ContextStack(root_transform)
        assert len(stack) == 1
        assert stack.top.identity == ROOT
        assert stack.top.transform == root_transform
        assert stack.top.anchors is None
        assert stack.top.style is None

    def test_pop_only_on_matching_name(self) -> None:
        """A close pops only when it names the top frame."""
        stack = ContextStack()
        stack.push(ContextFrame("g", Transform.identity()))
        assert not stack.pop_if("text")
        assert len(stack) == 2
        assert stack.pop_if("g")
        assert len(stack) == 1

    def test_root_is_never_popped(self) -> None:
        """Closing past the root is a no-op."""
        stack = ContextStack()
        assert not stack.pop_if(ROOT)
        assert not stack.pop_if("svg")
        assert len(stack) == 1

    def test_nearest_searches_from_top(self) -> None:
        """nearest returns the closest matching frame and its depth."""
        stack = ContextStack()
        text = ContextFrame("text", Transform.identity(), ((1.0, 2.0),))
        stack.push(text)
        stack.push(ContextFrame("g", Transform.identity()))
        found = stack.nearest({"text", "tspan"})
        assert found == (1, text)
        assert stack.nearest({"tspan"}) is None

    def test_resolve_style_walks_toward_root(self) -> None:
        """The first style found from the top down wins."""
        outer = Style(font_size=10.0)
        inner = Style(fill="red")
        stack = ContextStack()
        stack.push(ContextFrame("text", Transform.identity(), ((0.0, 0.0),), outer))
        stack.push(ContextFrame("g", Transform.identity()))
        assert stack.resolve_style() == outer
        stack.push(ContextFrame("tspan", Transform.identity(), (), inner))
        assert stack.resolve_style() == inner
        assert stack.resolve_style(start=2) == outer

    def test_resolve_style_absent(self) -> None:
        """Without any style the result is None."""
        stack = ContextStack()
        stack.push(ContextFrame("g", Transform.identity()))
        assert stack.resolve_style() is None

    def test_iteration_and_snapshot(self) -> None:
        """Iteration runs top-down; snapshot runs root-up."""
        stack = ContextStack()
        stack.push(ContextFrame("g", Transform.identity()))
        assert [frame.identity for frame in stack] == ["g", ROOT]
        assert [frame.identity for frame in stack.snapshot()] == [ROOT, "g"]
