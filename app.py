import logging
import tkinter as tk
import tkinter.messagebox as mbox

import config
from reminders import NotificationPermission, ReminderScheduler
from storage import JSONStorage, SnapshotSlot
from store import HabitStore
from ui.create_habit import CreateHabit
from ui.dashboard import Dashboard
from ui import theme

log = logging.getLogger(__name__)


class App(tk.Tk):
    def __init__(self):
        super().__init__()
        self.title("Habit Tracker")
        self.geometry("520x640")
        self.streak_anchor = config.STREAK_ANCHOR
        self.current = None

        storage = JSONStorage(config.DATA_PATH)
        self.store = HabitStore(SnapshotSlot(storage, config.HABITS_KEY))
        self.store.load()
        self.permission = NotificationPermission(storage, config.NOTIFICATIONS_KEY)
        self.reminders = ReminderScheduler(
            self,
            self.store,
            self.notify,
            self.permission,
            interval_ms=config.REMINDER_INTERVAL_MS,
            anchor=self.streak_anchor,
        )

        container = tk.Frame(self)
        container.pack(fill="both", expand=True)
        container.rowconfigure(0, weight=1)
        container.columnconfigure(0, weight=1)

        self.frames = {}
        for F in (Dashboard, CreateHabit):
            frame = F(parent=container, controller=self)
            self.frames[F.__name__] = frame
            frame.grid(row=0, column=0, sticky="nsew")

        self.protocol("WM_DELETE_WINDOW", self.close)
        self.reminders.start()
        self.show("Dashboard")

    def show(self, name):
        frame = self.frames[name]
        self.current = name
        if hasattr(frame, "refresh"):
            frame.refresh()
        frame.tkraise()

    def request_notifications(self):
        self.permission.request(
            lambda: mbox.askyesno(
                "Reminders",
                "Allow Habit Tracker to show reminder notifications?",
                parent=self,
            )
        )

    def notify(self, title: str, body: str):
        self.bell()
        theme.toast(self, title, body)

    def close(self):
        self.reminders.stop()
        self.destroy()


def main():
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    log.info("Starting Habit Tracker with data at %s", config.DATA_PATH)
    App().mainloop()


if __name__ == "__main__":
    main()
