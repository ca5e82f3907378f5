import logging
import sys
import tkinter as tk
from tkinter import messagebox

from core.common.app_context import AppContext
from core.i18n.errors import LoadError
from framework.gui.main_window import MainWindow


def _show_startup_error(exc: LoadError) -> None:
    tmp = tk.Tk()
    tmp.withdraw()
    messagebox.showerror("Localization Demo", str(exc), parent=tmp)
    tmp.destroy()


def main() -> int:
    """Startet die Anwendung; Exit-Code 1, wenn die Sprache nicht geladen werden kann."""
    config = AppContext.config
    logging.basicConfig(level=logging.DEBUG if config.general.debug else logging.WARNING)
    config.ensure_machine_config()

    AppContext.logger.log("App", "Start", message=f"{config.general.app_name} {config.general.version}")
    delegate = AppContext.init_localization()
    try:
        AppContext.load_initial_locale()
    except LoadError as exc:
        # LoadFailed wurde bereits vom Store protokolliert
        _show_startup_error(exc)
        return 1

    app = MainWindow(delegate=delegate, text=AppContext.text)
    try:
        app.mainloop()
    finally:
        AppContext.logger.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
