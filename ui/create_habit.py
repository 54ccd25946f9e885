# ui/create_habit.py
import tkinter as tk

from models import COLORS, DEFAULT_COLOR, DEFAULT_EMOJI, EMOJIS
from ui import theme


class CreateHabit(tk.Frame):
    def __init__(self, parent, controller):
        super().__init__(parent, bg=theme.BG)
        self.controller = controller
        self.emoji = tk.StringVar(value=DEFAULT_EMOJI)
        self.color = tk.StringVar(value=DEFAULT_COLOR)
        self.emoji_buttons = {}
        self.color_buttons = {}

        wrapper = theme.card(self)
        wrapper.pack(fill="x", padx=16, pady=18)

        header = tk.Frame(wrapper, bg=theme.CARD_BG)
        header.pack(fill="x", padx=14, pady=(12, 2))
        theme.heading_label(header, "New Habit", theme.TITLE).pack(anchor="w")

        form = tk.Frame(wrapper, bg=theme.CARD_BG)
        form.pack(padx=14, pady=10, fill="x")
        form.columnconfigure(0, weight=1)

        tk.Label(form, text="Habit Name", bg=theme.CARD_BG, fg=theme.TEXT, font=theme.BODY).grid(
            row=0, column=0, sticky="w"
        )
        self.name = tk.Entry(
            form,
            bg="#f9fafb",
            fg=theme.TEXT,
            relief="solid",
            bd=1,
            highlightbackground=theme.BORDER,
            highlightcolor=theme.ACCENT,
            font=theme.BODY,
        )
        self.name.grid(row=1, column=0, sticky="ew", pady=(2, 10))
        self.name.bind("<Return>", lambda _e: self.save())

        tk.Label(form, text="Choose Icon", bg=theme.CARD_BG, fg=theme.TEXT, font=theme.BODY).grid(
            row=2, column=0, sticky="w"
        )
        emoji_grid = tk.Frame(form, bg=theme.CARD_BG)
        emoji_grid.grid(row=3, column=0, sticky="w", pady=(2, 10))
        for i, glyph in enumerate(EMOJIS):
            btn = tk.Button(
                emoji_grid,
                text=glyph,
                width=2,
                font=theme.GLYPH,
                relief="flat",
                bd=0,
                cursor="hand2",
                command=lambda g=glyph: self._pick_emoji(g),
            )
            btn.grid(row=i // 6, column=i % 6, padx=2, pady=2)
            self.emoji_buttons[glyph] = btn

        tk.Label(form, text="Choose Color", bg=theme.CARD_BG, fg=theme.TEXT, font=theme.BODY).grid(
            row=4, column=0, sticky="w"
        )
        color_grid = tk.Frame(form, bg=theme.CARD_BG)
        color_grid.grid(row=5, column=0, sticky="w", pady=(2, 10))
        for i, color in enumerate(COLORS):
            btn = tk.Button(
                color_grid,
                width=5,
                bg=color,
                activebackground=color,
                relief="flat",
                bd=0,
                highlightthickness=3,
                cursor="hand2",
                command=lambda c=color: self._pick_color(c),
            )
            btn.grid(row=i // 4, column=i % 4, padx=3, pady=3)
            self.color_buttons[color] = btn

        tk.Label(
            form, text="Daily Reminder (optional, HH:MM)", bg=theme.CARD_BG, fg=theme.TEXT, font=theme.BODY
        ).grid(row=6, column=0, sticky="w")
        self.reminder = tk.Entry(
            form,
            width=8,
            bg="#f9fafb",
            fg=theme.TEXT,
            relief="solid",
            bd=1,
            font=theme.BODY,
        )
        self.reminder.grid(row=7, column=0, sticky="w", pady=(2, 10))

        controls = tk.Frame(wrapper, bg=theme.CARD_BG)
        controls.pack(fill="x", padx=14, pady=(0, 14))
        theme.ghost_button(controls, "Cancel", self.cancel).pack(side="left")
        theme.primary_button(controls, "Add Habit", self.save).pack(side="left", padx=8)

        self._pick_emoji(DEFAULT_EMOJI)
        self._pick_color(DEFAULT_COLOR)

    def refresh(self):
        self.name.focus_set()

    def _pick_emoji(self, glyph: str):
        self.emoji.set(glyph)
        for g, btn in self.emoji_buttons.items():
            btn.configure(bg=theme.HILITE if g == glyph else theme.BG)

    def _pick_color(self, color: str):
        self.color.set(color)
        for c, btn in self.color_buttons.items():
            btn.configure(highlightbackground=theme.TEXT if c == color else theme.CARD_BG)

    def _reset(self):
        self.name.delete(0, "end")
        self.reminder.delete(0, "end")
        self._pick_emoji(DEFAULT_EMOJI)
        self._pick_color(DEFAULT_COLOR)

    def cancel(self):
        self._reset()
        self.controller.show("Dashboard")

    def save(self):
        reminder = self.reminder.get().strip() or None
        habit = self.controller.store.add_habit(
            self.name.get(), self.emoji.get(), self.color.get(), reminder
        )
        if habit is None:
            return
        if habit.reminder:
            self.controller.request_notifications()
        self._reset()
        self.controller.show("Dashboard")
