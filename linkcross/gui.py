"""The game window: controls, information panel and the drawing area."""

from __future__ import annotations

import sys

from .constants import R_MAX, Mode
from .game import Game, Status
from .geometry import Point
from .graphic import Painter
from .messages import ReadError

BUTTONS = ("exit", "open", "save", "restart", "start", "step")
DRAWING_SIZE = 500
LOOP_PERIOD_MS = 25


def scaled(pos: Point, width: int, height: int) -> Point:
    """Convert a drawing-area position in pixels to model coordinates."""
    ratio = (2 * R_MAX) / min(width, height)
    return Point(ratio * (-(width // 2) + pos.x), ratio * (height // 2 - pos.y))


def accepted_file_name(name: str) -> bool:
    """True if ``name`` may be opened or saved as a game file."""
    return len(name) >= 4 and name.endswith(".txt")


class Window:
    """The state behind the window's controls, independent of any toolkit.

    A view attached through ``view`` is asked to ``refresh()`` after every
    change so that it can mirror this state on screen.
    """

    def __init__(self, file_name, view=None) -> None:
        self.game = Game()
        self.file_name = str(file_name)
        self.running = False
        self.start_label = "start"
        self.enabled = dict.fromkeys(BUTTONS, True)
        self.mode_enabled = dict.fromkeys(Mode, True)
        self.active_mode = Mode.CONSTRUCTION
        self.view = view
        self._set_game(self.file_name)

    @property
    def infos(self) -> dict[str, int]:
        return {
            "score": self.game.score,
            "particules": len(self.game.particles),
            "faiseurs": len(self.game.faiseurs),
            "articulations": len(self.game.chain),
        }

    def step(self) -> None:
        """Advance the game by one update, only while it is paused."""
        if not self.running:
            self.game.update()
            self._notify()

    def toggle_run(self) -> None:
        """Pause a running game, or start one that is still going on."""
        if self.running:
            self.running = False
            for name in BUTTONS:
                self.enabled[name] = True
            self.start_label = "start"
        elif self.game.status is Status.ONGOING:
            self.running = True
            for name in ("exit", "open", "save", "restart", "step"):
                self.enabled[name] = False
            self.start_label = "stop"
        self._notify()

    def restart(self) -> None:
        """Reload the last game file from scratch."""
        self.game.reset()
        self._set_game(self.file_name)

    def open_file(self, file_name) -> bool:
        """Load a new game file; names not ending in ``.txt`` are ignored."""
        name = str(file_name)
        if not accepted_file_name(name):
            return False
        self._set_game(name)
        self.file_name = name
        return True

    def save_file(self, file_name) -> bool:
        """Save the game; names not ending in ``.txt`` are ignored."""
        name = str(file_name)
        if not accepted_file_name(name):
            return False
        try:
            self.game.save(name)
        except OSError:
            print("Error opening file!", file=sys.stderr)
            return False
        return True

    def _select_mode(self, mode: Mode) -> None:
        self.game.chain.mode = mode
        self.active_mode = mode
        for other in Mode:
            self.mode_enabled[other] = other is not mode
        self._notify()

    def _key_pressed(self, key: str) -> bool:
        actions = {"1": self.step, "s": self.toggle_run, "r": self.restart}
        action = actions.get(key)
        if action is None:
            return False
        action()
        return True

    def _tick(self) -> bool:
        if not self.running:
            return False
        self.game.update()
        if self.game.status is not Status.ONGOING:
            for name in ("save", "start", "step"):
                self.enabled[name] = False
            self.active_mode = Mode.CONSTRUCTION
            for mode in Mode:
                self.mode_enabled[mode] = False
        self._notify()
        return True

    def _set_game(self, file_name: str) -> None:
        try:
            self.game.load(file_name)
        except OSError:
            print("erreur lors de l'ouverture du fichier")
        except ReadError as err:
            sys.stdout.write(err.message)

        if not self.game.loaded:
            for name in ("save", "start", "step"):
                self.enabled[name] = False
            self.active_mode = Mode.CONSTRUCTION
            for mode in Mode:
                self.mode_enabled[mode] = False
            self._notify()
        else:
            for name in ("save", "start", "step"):
                self.enabled[name] = True
            self._select_mode(self.game.chain.mode)

    def _notify(self) -> None:
        if self.view is not None:
            self.view.refresh()


class _TkView:
    """Shows a ``Window`` with tkinter widgets."""

    def __init__(self, root, window: Window) -> None:
        import tkinter as tk

        self.root = root
        self.window = window
        self._timer = None
        root.title("Linked-Crossing Challenge")

        panel = tk.Frame(root)
        panel.pack(side="left", fill="y")
        commands = tk.LabelFrame(panel, text="General")
        commands.pack(fill="x")

        actions = {
            "exit": root.destroy,
            "open": self._open,
            "save": self._save,
            "restart": window.restart,
            "start": window.toggle_run,
            "step": window.step,
        }
        self.buttons = {}
        for name in BUTTONS:
            button = tk.Button(commands, text=name, command=actions[name])
            button.pack(fill="x", padx=1, pady=1)
            self.buttons[name] = button

        self.mode_var = tk.StringVar(value=window.active_mode.value)
        self.mode_buttons = {}
        for mode, text in ((Mode.CONSTRUCTION, "Construction"), (Mode.GUIDAGE, "Guidage")):
            radio = tk.Radiobutton(
                commands,
                text=text,
                value=mode.value,
                variable=self.mode_var,
                command=lambda m=mode: window._select_mode(m),
            )
            radio.pack(anchor="w", padx=1, pady=1)
            self.mode_buttons[mode] = radio

        infos = tk.LabelFrame(panel, text="Info : nombre de...")
        infos.pack(fill="x")
        self.info_values = {}
        for row, key in enumerate(window.infos):
            tk.Label(infos, text=f"{key}:").grid(row=row, column=0, sticky="w", padx=3, pady=3)
            value = tk.Label(infos, text="")
            value.grid(row=row, column=1, sticky="e", padx=3, pady=3)
            self.info_values[key] = value
        infos.columnconfigure(0, weight=1, uniform="info")
        infos.columnconfigure(1, weight=1, uniform="info")

        self.canvas = tk.Canvas(
            root,
            width=DRAWING_SIZE,
            height=DRAWING_SIZE,
            background="white",
            highlightthickness=0,
        )
        self.canvas.pack(side="right", expand=True, fill="both")
        self.canvas.bind("<Configure>", lambda _event: self._redraw())
        root.bind("<Key>", lambda event: window._key_pressed(event.char))

    def refresh(self) -> None:
        window = self.window
        for name, button in self.buttons.items():
            button.configure(state="normal" if window.enabled[name] else "disabled")
        self.buttons["start"].configure(text=window.start_label)
        self.mode_var.set(window.active_mode.value)
        for mode, radio in self.mode_buttons.items():
            radio.configure(state="normal" if window.mode_enabled[mode] else "disabled")
        for key, value in window.infos.items():
            self.info_values[key].configure(text=str(value))
        self._redraw()
        if window.running and self._timer is None:
            self._timer = self.root.after(LOOP_PERIOD_MS, self._loop)

    def _loop(self) -> None:
        self._timer = None
        self.window._tick()

    def _redraw(self) -> None:
        self.canvas.delete("all")
        width = self.canvas.winfo_width()
        height = self.canvas.winfo_height()
        if width <= 1 or height <= 1:
            width = height = DRAWING_SIZE
        if self.window.game.loaded:
            self.window.game.draw(Painter(self.canvas, width, height))

    def _file_types(self):
        return [("Text files", "*.txt"), ("Any files", "*")]

    def _open(self) -> None:
        from tkinter import filedialog

        name = filedialog.askopenfilename(
            parent=self.root, title="Choose a text file", filetypes=self._file_types()
        )
        if name:
            self.window.open_file(name)

    def _save(self) -> None:
        from tkinter import filedialog

        name = filedialog.asksaveasfilename(
            parent=self.root, title="Choose a text file", filetypes=self._file_types()
        )
        if name:
            self.window.save_file(name)


def main(argv=None) -> int:
    """Open the game window on the file named by the single argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        return 1

    import tkinter as tk

    root = tk.Tk()
    window = Window(args[0])
    window.view = _TkView(root, window)
    window._notify()
    root.mainloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())