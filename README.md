# c78engine

Building blocks of a small game engine and its editor, usable on their own.
Everything here is plain Python; the only dependency is PyYAML.

## Modules

- `c78engine.uuid` – `UUID`, a 128-bit identifier made of two 64-bit halves.
  `UUID.generate()` makes a random one, `UUID.invalid()` is the all-zero one.
  `encode()` gives `UUID::XXXX:XXXX:XXXX:XXXX:XXXX:XXXX:XXXX:XXXX` (or
  `UUID::Invalid`), and `UUID.decode()` reads it back, raising `ValueError` on
  malformed text.
- `c78engine.buffer` – `Buffer`, a block of bytes with typed element access
  through `struct` formats (`at`, `set`, `clear`), and `ScopedBuffer`, which is
  released when its `with` block ends.
- `c78engine.timing` – `Timer` (elapsed seconds and milliseconds since creation
  or `reset()`) and `Timestep`, a frozen span of seconds.
- `c78engine.events` – `Event` and its window, application, key and mouse
  subclasses, each with an `EventType` and `EventCategory` flags, plus
  `EventDispatcher`, which runs a handler only for a matching event type and
  or-s its result into `event.handled`.
- `c78engine.layers` – `Layer` with overridable hooks and `LayerStack`, which
  keeps regular layers before overlays; `LayerStack` is a context manager that
  detaches every layer on exit.
- `c78engine.keycodes` – `Key` and `Mouse` code enums and conversion to and
  from display names (`key_code_to_string(Key.LEFT_ALT) == "LeftAlt"`).
- `c78engine.keycombo` – `InputState` (held keys and buttons, mouse position),
  `KeyCombo` (keys pressed together; the last key triggers it) and
  `KeyComboRecorder`. `str(KeyCombo([Key.LEFT_ALT, Key.F1]))` gives
  `"LeftAlt + F1 + "`, and `KeyCombo.from_string` reads that form back.
- `c78engine.filesystem` – `EntryType` classification by extension
  (`.pce` project, `.sce` scene, `.ace` asset registry, `.bce` binary, images,
  models, shaders, fonts), well-known names and locations, and small helpers
  for creating, reading, writing and removing files and directories.
- `c78engine.filehistory` – `FileHistory`, a back/forward history of visited
  directories.
- `c78engine.filesearcher` – `search()` for file names matching a wildcard
  directive such as `*.pce`, recursively and case-insensitively by default.
- `c78engine.project` – `ProjectConfig` and `Project`; `ProjectError` is raised
  whenever a project cannot be created, read or written.
- `c78engine.project_serializer` – YAML project files: `project_to_yaml`,
  `project_from_yaml`, `import_project`, `export_project`, `load_project`,
  `save_project`.
- `c78engine.project_manager` – `ProjectManager`, which creates, opens, saves,
  reloads and closes a single active project. It can be given a
  `save_file_prompt` callable to ask for a file when a project without one is
  saved.
- `c78engine.console` – `Console`, a layer that keeps a log, runs registered
  commands (`clear` and `close` are added on attach) and toggles its
  visibility on Left Alt + F1.
- `c78engine.config` – `WindowConfig` (default and last window size, kept in
  `config/editor.yml` under the root directory) and `ProjectHistory` (recently
  opened project files that still exist, kept in `config/LatestProjects.yml`).

## Install

```
pip install .
```

## Example

```python
from c78engine.uuid import UUID
from c78engine.events import EventDispatcher, WindowResizeEvent

handle = UUID.generate()
assert UUID.decode(handle.encode()) == handle

event = WindowResizeEvent(1280, 720)
EventDispatcher(event).dispatch(WindowResizeEvent, lambda e: True)
assert event.handled
```

Saving and loading a project:

```python
from pathlib import Path
from c78engine.project import Project, ProjectConfig
from c78engine.project_serializer import load_project, save_project

project = Project.create(Path("/home/me/games/demo"), ProjectConfig(name="Demo"))
written = save_project(project)          # /home/me/games/demo/Demo.pce
again = load_project(written)
assert again.config.name == "Demo"
```

## What it does not do

- There is no window, renderer, GUI or running application loop. Layers,
  events and the console hold state and react to events you feed them; nothing
  draws them.
- Keyboard and mouse state come from an `InputState` you update yourself; the
  package reads no devices.
- Projects store only their configuration. There is no asset manager, asset
  registry or scene storage: saving a project writes the `.pce` file alone,
  and loading one does not load any assets.
- Binary (`.bce`) project files are recognised but cannot be read or written;
  trying raises `ProjectError`.
- There is no command-line program.

## Tests

```
pip install .[test]
pytest
```