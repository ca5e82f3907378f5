"""
framework/gui/main_window.py
============================

Root-Window: Navigation über die Dashboard-Seiten, Sprachmenü und Statusleiste.
– Alle Texte kommen über die injizierte ``text``-Funktion.
– Nach einem Sprachwechsel baut das Fenster seine Texte neu auf.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import Frame, Label, Button, X, LEFT, messagebox
from typing import Callable, Dict, Optional

from core.i18n.errors import LoadError
from core.i18n.locale import Locale
from core.i18n.locale_events import LocaleChangeEvent
from core.i18n.localization_delegate import LocalizationDelegate
from dashboard.gui.dashboard_page import DASHBOARD_PAGES, DashboardPage


class MainWindow(tk.Tk):
    """Hauptfenster der Anwendung."""

    # ------------------------------------------------------------------ #
    # Konstruktor                                                        #
    # ------------------------------------------------------------------ #
    def __init__(self, *, delegate: LocalizationDelegate, text: Callable[[str], str]) -> None:
        super().__init__()
        self._delegate = delegate
        self._text = text

        self.geometry("800x500")

        # State
        self.active_page: Optional[DashboardPage] = None
        self.active_key: str = DASHBOARD_PAGES[0]
        self.locale_var = tk.StringVar(value=self._current_tag())

        # ---------- Frames ---------------------------------------------
        self.nav_frame = Frame(self, height=40, bg="#dddddd")
        self.nav_frame.pack(side="top", fill=X)

        self.display_area = Frame(self, bg="white")
        self.display_area.pack(fill="both", expand=True)

        self.status_bar = Label(self, text="", anchor="w", bg="#eeeeee")
        self.status_bar.pack(side="bottom", fill=X)

        # ---------- Navigation + Menü ----------------------------------
        self.nav_buttons: Dict[str, Button] = {}
        for key in DASHBOARD_PAGES:
            btn = Button(self.nav_frame, command=lambda k=key: self.show_page(k), padx=12, pady=2)
            btn.pack(side=LEFT, padx=5, pady=5)
            self.nav_buttons[key] = btn

        self.menubar = tk.Menu(self, tearoff=False)
        self.language_menu = tk.Menu(self.menubar, tearoff=False)
        for loc in delegate.supported_locales:
            self.language_menu.add_radiobutton(
                variable=self.locale_var,
                value=loc.tag,
                command=lambda loc=loc: self.change_locale(loc),
            )
        self.menubar.add_cascade(menu=self.language_menu)
        self.config(menu=self.menubar)

        delegate.subscribe(self._on_locale_changed)
        self.protocol("WM_DELETE_WINDOW", self.close)

        self.show_page(self.active_key)
        self.refresh_texts()

    # ------------------------------------------------------------------ #
    # Seiten                                                             #
    # ------------------------------------------------------------------ #
    def show_page(self, key: str) -> None:
        for widget in self.display_area.winfo_children():
            widget.destroy()
        self.active_key = key
        self.active_page = DashboardPage(self.display_area, text=self._text, text_key=key)
        self.active_page.pack(fill="both", expand=True)

    # ------------------------------------------------------------------ #
    # Sprache                                                            #
    # ------------------------------------------------------------------ #
    def change_locale(self, locale: Locale) -> bool:
        """Lädt *locale*; bei Fehler bleibt die alte Sprache aktiv."""
        try:
            self._delegate.load(self._delegate.resolve(locale), reason="user")
        except LoadError as exc:
            self.locale_var.set(self._current_tag())
            messagebox.showerror(
                self._text("load_error_title"),
                f"{self._text('load_error_message')}\n\n{exc}",
                parent=self,
            )
            return False
        return True

    def refresh_texts(self) -> None:
        self.title(self._text("title"))
        for key, btn in self.nav_buttons.items():
            btn.config(text=self._text(key))

        self.menubar.entryconfigure(0, label=self._text("language"))
        for index, loc in enumerate(self._delegate.supported_locales):
            self.language_menu.entryconfigure(index, label=self._text(f"language_{loc.language_code}"))

        if self.active_page is not None:
            self.active_page.refresh()
        self.status_bar.config(text=f"{self._text('active_language')}: {self._current_tag() or '-'}")

    def _on_locale_changed(self, event: LocaleChangeEvent) -> None:
        self.locale_var.set(event.new_locale.tag)
        self.refresh_texts()

    def _current_tag(self) -> str:
        loc = self._delegate.store.locale
        return loc.tag if loc else ""

    def close(self) -> None:
        self._delegate.unsubscribe(self._on_locale_changed)
        self.destroy()
