# ui/dashboard.py (today's habits)
import tkinter as tk
from datetime import date
import tkinter.messagebox as mbox

from streaks import current_streak, is_completed_today
from ui import theme


class Dashboard(tk.Frame):
    def __init__(self, parent, controller):
        super().__init__(parent, bg=theme.BG)
        self.controller = controller

        main = tk.Frame(self, bg=theme.BG)
        main.pack(fill="both", expand=True, padx=16, pady=14)

        header = tk.Frame(main, bg=theme.BG)
        header.pack(fill="x", padx=12, pady=(12, 6))
        theme.heading_label(header, "Habit Tracker", theme.TITLE).pack(anchor="center")
        theme.muted_label(header, "Build streaks, build habits 🔥").pack(anchor="center")

        controls = tk.Frame(main, bg=theme.BG)
        controls.pack(fill="x", padx=12, pady=(6, 10))
        theme.primary_button(controls, "New Habit", lambda: controller.show("CreateHabit")).pack(
            side="left", padx=(0, 8)
        )

        theme.muted_label(
            main,
            "Click or use Up/Down to select. Space toggles today. Delete removes the habit.",
            wrap=480,
        ).pack(anchor="w", padx=12, pady=(0, 6))

        self.list_frame = tk.Frame(main, bg=theme.BG)
        self.list_frame.pack(fill="both", expand=True, padx=12)

        self.rows = []  # list of dicts: {"frame":..., "btn":..., "id":..., "name":...}
        self.selected_idx = None

        self.bind_all("<Up>", self._move_up)
        self.bind_all("<Down>", self._move_down)
        self.bind_all("<space>", self._activate_selected)
        self.bind_all("<Delete>", self._delete_selected)

    def refresh(self):
        for w in self.list_frame.winfo_children():
            w.destroy()
        self.rows.clear()
        self.selected_idx = None

        store = self.controller.store
        today = date.today()
        habits = store.list_habits()

        if not habits:
            empty = theme.card(self.list_frame)
            empty.pack(fill="x", pady=6, padx=2)
            tk.Label(empty, text="🎯", font=(theme.FONT_FAMILY, 36), bg=theme.CARD_BG).pack(
                pady=(12, 0)
            )
            tk.Label(
                empty,
                text="No habits yet",
                font=theme.HEADING,
                bg=theme.CARD_BG,
                fg=theme.TEXT,
            ).pack(pady=(4, 2))
            theme.muted_label(empty, "Start building your routine!").pack(pady=(0, 12))
            return

        for i, h in enumerate(habits):
            done = is_completed_today(h, today)
            streak = current_streak(h, today, anchor=self.controller.streak_anchor)

            row = theme.card(self.list_frame, accent=h.color, padx=0, pady=0)
            row.pack(fill="x", pady=6)
            body = tk.Frame(row, bg=theme.CARD_BG, padx=12, pady=10)
            body.pack(side="left", fill="x", expand=True)

            btn = tk.Button(
                body,
                width=3,
                font=theme.GLYPH,
                bd=0,
                relief="flat",
                cursor="hand2",
                takefocus=False,
            )
            btn["command"] = lambda hid=h.id: self.toggle(hid)
            self._style_complete_button(btn, done, h.emoji)
            btn.pack(side="left")

            info = tk.Frame(body, bg=theme.CARD_BG)
            info.pack(side="left", padx=12, fill="x", expand=True)
            name = tk.Label(
                info, text=h.name, anchor="w", bg=theme.CARD_BG, fg=theme.TEXT, font=theme.HEADING
            )
            name.pack(anchor="w")
            badges = tk.Frame(info, bg=theme.CARD_BG)
            badges.pack(anchor="w", pady=(2, 0))
            if streak > 0:
                theme.pill(badges, f"🔥 {streak} days", fg=theme.STREAK).pack(side="left", padx=(0, 6))
            if h.reminder:
                theme.pill(badges, f"⏰ {h.reminder}", fg=theme.MUTED, bg=theme.BG).pack(side="left")

            del_btn = tk.Button(
                body,
                text="Delete",
                width=7,
                font=theme.BUTTON,
                bg=theme.CARD_BG,
                fg=theme.DANGER,
                activebackground=theme.DANGER,
                activeforeground="#ffffff",
                relief="flat",
                bd=0,
                cursor="hand2",
            )
            del_btn["command"] = lambda hid=h.id: self._delete_habit(hid)
            del_btn.pack(side="right", padx=2)

            for widget in (row, body, info, name, btn, del_btn):
                widget.bind("<Button-1>", lambda _e, j=i: self._select_row(j), add="+")

            self.rows.append({"frame": body, "btn": btn, "id": h.id, "name": name, "info": info})

        self._select_row(0)

    # ---------- Selection helpers ----------
    def _paint_row(self, row, bg):
        for widget in (row["frame"], row["name"], row["info"]):
            widget.configure(bg=bg)
        for child in row["info"].winfo_children():
            if isinstance(child, tk.Frame):
                child.configure(bg=bg)

    def _select_row(self, idx: int):
        if not self.rows:
            return
        idx = max(0, min(idx, len(self.rows) - 1))
        self.selected_idx = idx
        for r in self.rows:
            self._paint_row(r, theme.CARD_BG)
        self._paint_row(self.rows[idx], theme.HILITE)
        self.rows[idx]["frame"].focus_set()

    def _move_up(self, _event=None):
        if self.selected_idx is None or self._inactive():
            return
        self._select_row(self.selected_idx - 1)

    def _move_down(self, _event=None):
        if self.selected_idx is None or self._inactive():
            return
        self._select_row(self.selected_idx + 1)

    def _inactive(self) -> bool:
        # key bindings are global; ignore them on other screens and inside text fields
        return self.controller.current != "Dashboard" or isinstance(self.focus_get(), tk.Entry)

    def _activate_selected(self, _event=None):
        if self.selected_idx is None or self._inactive():
            return
        self.toggle(self.rows[self.selected_idx]["id"])

    def _delete_habit(self, habit_id: str):
        if not mbox.askyesno(
            "Delete habit?",
            "Are you sure you want to delete this habit?\nIts streak history goes with it.",
        ):
            return
        self.controller.store.delete_habit(habit_id)
        self.refresh()

    def _delete_selected(self, _event=None):
        if self.selected_idx is None or not self.rows or self._inactive():
            return
        self._delete_habit(self.rows[self.selected_idx]["id"])

    def _style_complete_button(self, button: tk.Button, done: bool, emoji: str):
        if done:
            button.configure(
                text="✓",
                bg=theme.SUCCESS,
                fg="#ffffff",
                activebackground=theme.SUCCESS,
                activeforeground="#ffffff",
            )
        else:
            button.configure(
                text=emoji,
                bg=theme.BG,
                fg=theme.TEXT,
                activebackground=theme.HILITE,
                activeforeground=theme.TEXT,
            )

    # ---------- Completion toggle ----------
    def toggle(self, habit_id: str):
        selected = self.selected_idx
        self.controller.store.toggle_today(habit_id)
        # streak badges depend on today's state, so rebuild the list
        self.refresh()
        if selected is not None:
            self._select_row(selected)
