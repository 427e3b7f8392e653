"""Application layers and the ordered stack that holds them."""

from __future__ import annotations

from typing import Iterator

from .events import Event
from .timing import Timestep


class Layer:
    """A unit of per-frame behaviour; subclasses override the hooks.

    The default hooks keep track of the layer's state so that the stack
    and the application can tell what has happened to it.
    """

    def __init__(self, name: str = "Layer") -> None:
        self.name = name
        self.attached = False
        self.last_timestep: Timestep | None = None
        self.render_count = 0
        self.last_event: Event | None = None

    def on_attach(self) -> None:
        """Mark the layer as attached."""
        self.attached = True

    def on_detach(self) -> None:
        """Mark the layer as detached."""
        self.attached = False

    def on_update(self, timestep: Timestep) -> None:
        """Remember the timestep of the latest update."""
        self.last_timestep = timestep

    def on_imgui_render(self) -> None:
        """Count the render passes the layer has taken part in."""
        self.render_count += 1

    def on_event(self, event: Event) -> bool:
        """Remember the event; the default layer never consumes it."""
        self.last_event = event
        return event is not event


class LayerStack:
    """Layers in order, with overlays always after regular layers."""

    def __init__(self) -> None:
        self._layers: list[Layer] = []
        self._insert_index = 0

    @staticmethod
    def _find(layers: list[Layer], target: Layer) -> int | None:
        return next((pos for pos, layer in enumerate(layers) if layer is target), None)

    def push_layer(self, layer: Layer) -> None:
        self._layers.insert(self._insert_index, layer)
        self._insert_index += 1

    def push_overlay(self, overlay: Layer) -> None:
        self._layers.append(overlay)

    def pop_layer(self, layer: Layer) -> None:
        """Detach and remove ``layer`` if it is among the regular layers."""
        pos = self._find(self._layers[: self._insert_index], layer)
        if pos is not None:
            layer.on_detach()
            del self._layers[pos]
            self._insert_index -= 1

    def pop_overlay(self, overlay: Layer) -> None:
        """Detach and remove ``overlay`` if it is among the overlays."""
        pos = self._find(self._layers[self._insert_index:], overlay)
        if pos is not None:
            overlay.on_detach()
            del self._layers[self._insert_index + pos]

    def close(self) -> None:
        """Detach every layer still on the stack."""
        for layer in self._layers:
            layer.on_detach()

    def __enter__(self) -> LayerStack:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def __iter__(self) -> Iterator[Layer]:
        return iter(self._layers)

    def __reversed__(self) -> Iterator[Layer]:
        return reversed(self._layers)

    def __len__(self) -> int:
        return len(self._layers)