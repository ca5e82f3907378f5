"""
Dashboard page – shows one translated text, centred and bold.

Conventions:
- The lookup function is injected; the page never touches the store.
- refresh() re-reads the text after a locale change.
"""

from __future__ import annotations

import tkinter as tk
from typing import Callable

DASHBOARD_PAGES: tuple[str, ...] = ("page_one", "page_two", "page_three")

PAGE_FONT = ("TkDefaultFont", 22, "bold")


class DashboardPage(tk.Frame):
    def __init__(self, parent: tk.Misc, *, text: Callable[[str], str], text_key: str) -> None:
        super().__init__(parent, bg="white")
        self._text = text
        self.text_key = text_key

        self.text_var = tk.StringVar(value=self._text(text_key))
        self.label = tk.Label(self, textvariable=self.text_var, font=PAGE_FONT, bg="white")
        self.label.place(relx=0.5, rely=0.5, anchor="center")

    def refresh(self) -> None:
        self.text_var.set(self._text(self.text_key))
