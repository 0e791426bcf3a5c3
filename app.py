# app.py
# CustomTkinter desktop client for the anagram dictionary service (dark theme).
# - Talks to the HTTP API (python -m anagrams_web) through AnagramClient.
# - Requests run on a worker thread so the UI stays responsive.
# - Input is checked while typing; "Add word" is disabled for non-letters.

from __future__ import annotations
import re
import threading
from typing import Callable, List, Optional

import tkinter.messagebox as mb
import customtkinter as ctk

from anagrams.config import API_URL, WORD_PATTERN
from anagrams_web.client import AnagramClient, ApiError

_WORD_RE = re.compile(WORD_PATTERN)


# -------------------- small helpers --------------------

def is_valid_input(text: str) -> bool:
    """Letters only; an empty field is allowed (nothing typed yet)."""
    return text == "" or bool(_WORD_RE.fullmatch(text))


def format_similar(word: str, words: List[str]) -> str:
    if not words:
        return f"(no anagrams of {word!r} in the dictionary)"
    return "\n".join(f"• {w}" for w in words)


def format_stats(stats: dict) -> str:
    return (
        f"Total words:      {stats.get('totalWords', 0):,}\n"
        f"Total requests:   {stats.get('totalRequests', 0):,}\n"
        f"Avg processing:   {stats.get('avgProcessingTimeMs', 0):,} µs"
    )


# -------------------- main app --------------------

class AnagramApp(ctk.CTk):
    """Dark-themed GUI: find similar words, add a word, show usage statistics."""

    def __init__(self, client: Optional[AnagramClient] = None) -> None:
        super().__init__()

        # Theme
        ctk.set_appearance_mode("dark")
        ctk.set_default_color_theme("blue")

        # Window
        self.title("Anagram Dictionary")
        self.geometry("720x560")
        self.minsize(620, 460)

        # State
        self.client = client or AnagramClient(API_URL)
        self._busy: bool = False

        # Fonts
        self.font_title = ctk.CTkFont(size=18, weight="bold")
        self.font_label = ctk.CTkFont(size=13)
        self.font_mono = ctk.CTkFont(family="Cascadia Mono, Menlo, Consolas, Courier New", size=13)

        # Layout grid
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(3, weight=1)  # results

        # Build UI
        self._build_header()
        self._build_input()
        self._build_buttons()
        self._build_results()

        self._set_status(f"Server: {self.client.base_url}")
        self.protocol("WM_DELETE_WINDOW", self._on_close)

    # --------- UI sections ---------

    def _build_header(self) -> None:
        header = ctk.CTkFrame(self, corner_radius=10)
        header.grid(row=0, column=0, sticky="ew", padx=12, pady=(12, 6))
        header.grid_columnconfigure(0, weight=1)

        ctk.CTkLabel(header, text="Anagram Dictionary", font=self.font_title).grid(
            row=0, column=0, sticky="w", padx=12, pady=10
        )
        self.lbl_status = ctk.CTkLabel(header, text="", anchor="e")
        self.lbl_status.grid(row=0, column=1, sticky="e", padx=12, pady=10)

    def _build_input(self) -> None:
        box = ctk.CTkFrame(self, corner_radius=10)
        box.grid(row=1, column=0, sticky="ew", padx=12, pady=6)
        box.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(box, text="Word:", font=self.font_label).grid(row=0, column=0, sticky="w", padx=12, pady=10)
        self.entry_word = ctk.CTkEntry(box, placeholder_text="Enter a word")
        self.entry_word.grid(row=0, column=1, sticky="ew", padx=(6, 12), pady=10)
        self.entry_word.bind("<KeyRelease>", self._on_word_changed)
        self.entry_word.bind("<Return>", lambda _ev: self._find_similar())

        self.lbl_error = ctk.CTkLabel(box, text="", text_color="#ff5d5d", anchor="w")
        self.lbl_error.grid(row=1, column=1, sticky="w", padx=(6, 12), pady=(0, 6))

    def _build_buttons(self) -> None:
        bar = ctk.CTkFrame(self, corner_radius=10)
        bar.grid(row=2, column=0, sticky="ew", padx=12, pady=6)

        self.btn_similar = ctk.CTkButton(bar, text="Find Similar Words", command=self._find_similar)
        self.btn_similar.grid(row=0, column=0, padx=(12, 6), pady=10)
        self.btn_add = ctk.CTkButton(bar, text="Add Word", command=self._add_word)
        self.btn_add.grid(row=0, column=1, padx=6, pady=10)
        self.btn_stats = ctk.CTkButton(bar, text="Get Stats", command=self._get_stats)
        self.btn_stats.grid(row=0, column=2, padx=6, pady=10)

        self.progress = ctk.CTkProgressBar(bar, mode="indeterminate", determinate_speed=1.2)
        self.progress.grid(row=0, column=3, sticky="e", padx=(6, 12), pady=10)

    def _build_results(self) -> None:
        frame = ctk.CTkFrame(self, corner_radius=10)
        frame.grid(row=3, column=0, sticky="nsew", padx=12, pady=(6, 12))
        frame.grid_columnconfigure(0, weight=1)
        frame.grid_rowconfigure(1, weight=1)

        ctk.CTkLabel(frame, text="Results", font=self.font_label).grid(
            row=0, column=0, sticky="w", padx=12, pady=(10, 2)
        )
        self.txt_results = ctk.CTkTextbox(frame, wrap="word", font=self.font_mono)
        self.txt_results.grid(row=1, column=0, sticky="nsew", padx=12, pady=(0, 12))
        self._set_results("(type a word and choose an action)")

    # --------- actions ---------

    def _on_word_changed(self, _ev=None) -> None:
        ok = is_valid_input(self.entry_word.get())
        self.lbl_error.configure(text="" if ok else "Input must contain only letters")
        self.btn_add.configure(state="normal" if ok else "disabled")

    def _find_similar(self) -> None:
        word = self.entry_word.get().strip()
        self._run(lambda: self.client.similar(word), lambda words: self._set_results(format_similar(word, words)))

    def _add_word(self) -> None:
        word = self.entry_word.get().strip()

        def done(text: str) -> None:
            self._set_results(text)
            self.entry_word.delete(0, "end")

        self._run(lambda: self.client.add_word(word), done)

    def _get_stats(self) -> None:
        self._run(self.client.stats, lambda stats: self._set_results(format_stats(stats)))

    # --------- worker thread ---------

    def _run(self, call: Callable, on_ok: Callable) -> None:
        # one request at a time
        if self._busy:
            return
        self._busy = True
        self.progress.start()

        def worker() -> None:
            try:
                result = call()
            except ApiError as exc:
                # exc is unbound once the except block ends; capture the text now
                msg = f"{exc.type}: {exc.message}"
                self.after(0, lambda: self._on_done(None, msg))
                return
            except Exception as exc:
                msg = f"Request failed: {exc!r}"
                self.after(0, lambda: self._on_done(None, msg, popup=True))
                return
            self.after(0, lambda: self._on_done(lambda: on_ok(result), None))

        threading.Thread(target=worker, daemon=True).start()

    def _on_done(self, apply: Optional[Callable], error: Optional[str], popup: bool = False) -> None:
        self.progress.stop()
        self._busy = False
        if error is None:
            apply()
            self._set_status(f"Server: {self.client.base_url}")
            return
        self._set_results(error)
        self._set_status("Error")
        if popup:
            mb.showerror("Request error", f"{error}\nIs the server running at {self.client.base_url}?")

    # --------- misc UI helpers ---------

    def _set_status(self, text: str) -> None:
        self.lbl_status.configure(text=text)

    def _set_results(self, text: str) -> None:
        self.txt_results.configure(state="normal")
        self.txt_results.delete("0.0", "end")
        if text:
            self.txt_results.insert("end", text)
        self.txt_results.configure(state="disabled")

    # --------- lifecycle ---------

    def _on_close(self) -> None:
        self.client.close()
        self.destroy()


if __name__ == "__main__":
    app = AnagramApp()
    app.mainloop()
