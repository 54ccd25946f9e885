"""Shared visual style helpers for the Tk UI (soft indigo palette)."""

import tkinter as tk

BG = "#eef2ff"
CARD_BG = "#ffffff"
BORDER = "#e5e7eb"
TEXT = "#1f2937"
MUTED = "#6b7280"
ACCENT = "#6366f1"       # indigo
ACCENT_DARK = "#4f46e5"
SUCCESS = "#10b981"      # emerald
DANGER = "#ef4444"
STREAK = "#f97316"       # orange flame
HILITE = "#e0e7ff"

FONT_FAMILY = "Helvetica"
TITLE = (FONT_FAMILY, 20, "bold")
HEADING = (FONT_FAMILY, 13, "bold")
BODY = (FONT_FAMILY, 11)
SMALL = (FONT_FAMILY, 9)
BUTTON = (FONT_FAMILY, 10, "bold")
GLYPH = (FONT_FAMILY, 18)


def card(parent, accent=None, **kwargs):
    """White card; `accent` paints a left border strip in the habit's color."""
    frame = tk.Frame(
        parent,
        bg=CARD_BG,
        bd=0,
        highlightbackground=BORDER,
        highlightthickness=1,
        **kwargs,
    )
    if accent:
        tk.Frame(frame, bg=accent, width=4).pack(side="left", fill="y")
    return frame


def heading_label(parent, text, font=TITLE):
    return tk.Label(parent, text=text, bg=parent.cget("bg"), fg=TEXT, font=font)


def muted_label(parent, text, font=BODY, wrap=None):
    return tk.Label(
        parent,
        text=text,
        bg=parent.cget("bg"),
        fg=MUTED,
        font=font,
        justify="left",
        wraplength=wrap,
        anchor="w",
    )


def primary_button(parent, text, command):
    return tk.Button(
        parent,
        text=text,
        command=command,
        bg=ACCENT,
        fg="#ffffff",
        activebackground=ACCENT_DARK,
        activeforeground="#ffffff",
        relief="flat",
        bd=0,
        font=BUTTON,
        padx=14,
        pady=8,
        cursor="hand2",
        highlightthickness=0,
    )


def ghost_button(parent, text, command):
    return tk.Button(
        parent,
        text=text,
        command=command,
        bg=CARD_BG,
        fg=ACCENT,
        activebackground=HILITE,
        activeforeground=ACCENT_DARK,
        relief="solid",
        bd=1,
        font=BUTTON,
        padx=12,
        pady=7,
        cursor="hand2",
    )


def pill(parent, text, fg=ACCENT, bg=HILITE):
    """Small tag-style label (streak count, reminder time)."""
    return tk.Label(
        parent,
        text=text,
        bg=bg,
        fg=fg,
        font=(FONT_FAMILY, 9, "bold"),
        padx=8,
        pady=2,
    )


def toast(root, title, body, timeout_ms=60_000):
    """Non-modal notification window; closes itself after timeout_ms."""
    win = tk.Toplevel(root, bg=CARD_BG, padx=16, pady=12)
    win.title(title)
    win.attributes("-topmost", True)
    win.resizable(False, False)
    heading_label(win, title, HEADING).pack(anchor="w")
    muted_label(win, body, wrap=280).pack(anchor="w", pady=(4, 10))
    primary_button(win, "OK", win.destroy).pack(anchor="e")
    root.after(timeout_ms, lambda: win.winfo_exists() and win.destroy())
    return win
