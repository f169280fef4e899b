"""Tests for AnnotationEvent."""

from code_annotations.events import CREATE_ANNOTATION, AnnotationEvent


class TestAnnotationEvent:
    """Test AnnotationEvent construction and param access."""

    def test_defaults(self):
        """Test an empty event."""
        event = AnnotationEvent()

        assert event.name == CREATE_ANNOTATION
        assert event.target is None
        assert event.params == {}
        assert event.get_param("class", False) is False

    def test_create(self):
        """Test the create helper fills class and content params."""
        target = object()
        event = AnnotationEvent.create("Route", "(path=/)", line=12)
        event.target = target

        assert event.get_param("class") == "Route"
        assert event.get_param("content") == "(path=/)"
        assert event.get_param("line") == 12
        assert event.target is target

    def test_params_not_shared(self):
        """Test each event gets its own params dict."""
        first = AnnotationEvent()
        second = AnnotationEvent()
        first.params["class"] = "Route"

        assert second.params == {}
