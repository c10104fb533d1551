"""Port interface for editor views that display annotations."""

from abc import abstractmethod
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from lintlens.kernel.domain import Annotation, DecorationStyle, TextDocument, ViolatedRule


type RuleParser = Callable[["TextDocument"], Sequence["ViolatedRule"]]


@runtime_checkable
class EditorView(Protocol):
    """A live document display surface owned by the host editor.

    A view may be disposed at any time. Callers check ``is_disposed`` before
    applying annotations; operations on a disposed view are no-ops.
    """

    @property
    def document(self) -> "TextDocument | None":
        """The document shown in this view, if any."""
        ...

    @property
    def is_disposed(self) -> bool:
        """True once the host has closed the view."""
        ...

    @abstractmethod
    def set_annotations(self, kind: "DecorationStyle", annotations: Sequence["Annotation"]) -> None:
        """Replace every annotation of ``kind`` shown in this view.

        Args
        ----
            kind: Decoration style the annotations are rendered with
            annotations: The complete new set; an empty sequence clears the kind
        """
        ...
