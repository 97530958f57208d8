"""
Qt Renderer
===========
Mount/replace/unmount primitives over QWidget layouts.

Containers are widgets with a box layout; a view is any QWidget.
"""
from __future__ import annotations

from typing import Optional

from PySide6.QtWidgets import QWidget

from tripboard.view.base import RenderPosition


class QtRenderer:
    def render(self, view: QWidget, container: QWidget, position: RenderPosition = RenderPosition.BEFOREEND) -> None:
        layout = container.layout()
        if layout is None:
            raise RuntimeError("Container has no layout to render into.")

        if position is RenderPosition.AFTERBEGIN:
            layout.insertWidget(0, view)
        else:
            layout.addWidget(view)
        view.show()

    def replace(self, new_view: QWidget, old_view: QWidget) -> None:
        parent = old_view.parentWidget()
        layout = parent.layout() if parent is not None else None
        if layout is None:
            raise RuntimeError("Can't replace a view that is not mounted.")

        index = layout.indexOf(old_view)
        layout.insertWidget(index, new_view)
        new_view.show()
        self.remove(old_view)

    def remove(self, view: Optional[QWidget]) -> None:
        if view is None:
            return

        parent = view.parentWidget()
        if parent is not None and parent.layout() is not None:
            parent.layout().removeWidget(view)
        view.hide()
        view.setParent(None)
        view.deleteLater()
