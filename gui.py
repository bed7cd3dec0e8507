import tkinter as tk
from tkinter import ttk, messagebox

from utils.logger import setup_logger
from data.repository import MenuRepository, base_toppings_for
from services.notifier import Notifier
from services.order_service import OrderService


class TkNotifier(Notifier):
    # tkinter dialogs behind the Notifier interface used by the services.

    def __init__(self, root: tk.Tk, timeout_ms: int = 5000):
        self.root = root
        self.timeout_ms = timeout_ms

    def notify(self, message: str) -> None:
        """
        Modal notification that closes itself after timeout_ms,
        or earlier when the user presses Close.
        """
        popup = tk.Toplevel(self.root)
        popup.title("Notification")
        popup.resizable(False, False)
        ttk.Label(popup, text=message, wraplength=360).pack(padx=20, pady=15)
        timer = popup.after(self.timeout_ms, popup.destroy)

        def close():
            popup.after_cancel(timer)
            popup.destroy()

        ttk.Button(popup, text="Close", command=close).pack(pady=(0, 10))
        popup.protocol("WM_DELETE_WINDOW", close)
        popup.grab_set()
        popup.wait_window()

    def inform(self, message: str) -> None:
        messagebox.showinfo("Information", message, parent=self.root)

    def warn(self, message: str) -> None:
        messagebox.showwarning("Warning", message, parent=self.root)

    def confirm(self, message: str) -> bool:
        return messagebox.askyesno("Confirmation", message, parent=self.root)


class PizzaShopApp:
    def __init__(self, root: tk.Tk):
        # core services / data
        self.root = root
        self.logger = setup_logger()
        self.repo = MenuRepository()
        self.menu = self.repo.get_menu()

        self.root.title(f"{self.menu['shop_name']} Corner Food - Pizza Master")
        self.root.geometry("980x600")
        self.root.resizable(False, False)

        self.notifier = TkNotifier(self.root, self.menu["notification_timeout_ms"])
        self.order_service = OrderService(self.menu, self.notifier)

        self.current_frame = None
        self.show_splash()

    def _swap_frame(self, frame: ttk.Frame):
        if self.current_frame is not None:
            self.current_frame.destroy()
        self.current_frame = frame
        frame.pack(fill="both", expand=True)

    # SPLASH

    def show_splash(self):
        frame = ttk.Frame(self.root)
        ttk.Label(
            frame,
            text=f"{self.menu['shop_name']} Corner Food",
            font=("Segoe UI", 28, "bold")
        ).pack(pady=(180, 10))
        ttk.Label(frame, text="Pizza Master", font=("Segoe UI", 16)).pack()

        self.splash_progress = ttk.Progressbar(frame, length=500, maximum=100, mode="determinate")
        self.splash_progress.pack(pady=40)
        self._swap_frame(frame)

        self.logger.info("GUI: splash shown")
        self._advance_splash(0)

    def _advance_splash(self, value: int):
        # driven by after() so the progress bar is only touched on the Tk thread
        self.splash_progress["value"] = value
        if value < 100:
            self.root.after(self.menu["splash_step_ms"], self._advance_splash, value + 1)
        else:
            self.show_login()

    # LOGIN

    def show_login(self):
        frame = ttk.Frame(self.root)
        box = ttk.LabelFrame(frame, text="Login")
        box.pack(pady=180)

        ttk.Label(box, text="Username:").grid(row=0, column=0, sticky="e", padx=5, pady=10)
        self.username_entry = ttk.Entry(box, width=30)
        self.username_entry.grid(row=0, column=1, sticky="w", padx=5, pady=10)
        self.username_entry.focus()

        login_btn = ttk.Button(box, text="Login", command=self.gui_login)
        login_btn.grid(row=1, column=0, columnspan=2, pady=(0, 10))
        self.username_entry.bind("<Return>", lambda e: self.gui_login())

        self._swap_frame(frame)

    def gui_login(self):
        session = self.order_service.login(self.username_entry.get())
        if session is None:
            return
        self.logger.info(f"GUI: logged in as {session.username}")
        self.show_shop()

    # SHOP

    def show_shop(self):
        frame = ttk.Frame(self.root)
        pizza_names = list(self.menu["pizzas"])

        header = ttk.Frame(frame)
        header.pack(fill="x", padx=10, pady=(10, 0))
        ttk.Label(
            header,
            text=f"Welcome {self.order_service.session.username}",
            font=("Segoe UI", 14, "bold")
        ).pack(side="left")

        body = ttk.Frame(frame)
        body.pack(fill="both", expand=True, padx=10, pady=10)

        # left: pizza picker
        picker = ttk.LabelFrame(body, text="Type of Pizza")
        picker.pack(side="left", fill="y", padx=(0, 10))
        for name in pizza_names:
            ttk.Button(
                picker,
                text=name,
                width=20,
                command=lambda n=name: self.select_pizza(n)
            ).pack(padx=10, pady=8)

        # middle: pizza form
        form = ttk.LabelFrame(body, text="Your Pizza")
        form.pack(side="left", fill="y", padx=(0, 10))

        self.selected_type = tk.StringVar()
        self.base_toppings_text = tk.StringVar()
        ttk.Label(form, textvariable=self.selected_type, font=("Segoe UI", 13, "bold")).grid(
            row=0, column=0, columnspan=2, sticky="w", padx=5, pady=(5, 0))
        ttk.Label(form, textvariable=self.base_toppings_text).grid(
            row=1, column=0, columnspan=2, sticky="w", padx=5, pady=(0, 10))

        ttk.Label(form, text="Size of Pizza").grid(row=2, column=0, columnspan=2, sticky="w", padx=5)
        self.size_var = tk.StringVar()
        for i, size in enumerate(self.menu["sizes"]):
            ttk.Radiobutton(form, text=size, value=size, variable=self.size_var).grid(
                row=3 + i // 2, column=i % 2, sticky="w", padx=5)

        row = 5
        self.customize_var = tk.BooleanVar()
        ttk.Checkbutton(
            form,
            text="Extra Toppings",
            variable=self.customize_var,
            command=self.toggle_extras
        ).grid(row=row, column=0, columnspan=2, sticky="w", padx=5, pady=(10, 0))

        self.extra_vars: dict[str, tk.BooleanVar] = {}
        self.extra_checks: list[ttk.Checkbutton] = []
        for i, topping in enumerate(self.menu["extra_toppings"]):
            var = tk.BooleanVar()
            check = ttk.Checkbutton(form, text=topping, variable=var)
            check.grid(row=row + 1 + i // 2, column=i % 2, sticky="w", padx=15)
            self.extra_vars[topping] = var
            self.extra_checks.append(check)
        row += 2 + len(self.extra_checks) // 2

        ttk.Label(form, text="Quantity").grid(row=row, column=0, sticky="e", padx=5, pady=10)
        self.qty_combo = ttk.Combobox(
            form,
            values=[str(q) for q in range(1, self.menu["max_quantity"] + 1)],
            width=5,
            state="readonly"
        )
        self.qty_combo.grid(row=row, column=1, sticky="w", padx=5, pady=10)

        ttk.Button(form, text="Add to order list", command=self.gui_add_to_order).grid(
            row=row + 1, column=0, columnspan=2, pady=(0, 10))

        # right: order list
        order_box = ttk.LabelFrame(body, text="Order List")
        order_box.pack(side="left", fill="both", expand=True)

        columns = ("type", "size", "toppings", "qty", "price")
        self.order_tree = ttk.Treeview(order_box, columns=columns, show="headings", height=16)
        self.order_tree.heading("type", text="Type")
        self.order_tree.heading("size", text="Size")
        self.order_tree.heading("toppings", text="Toppings")
        self.order_tree.heading("qty", text="Quantity")
        self.order_tree.heading("price", text="Price of One")
        self.order_tree.column("type", width=110)
        self.order_tree.column("size", width=60)
        self.order_tree.column("toppings", width=200)
        self.order_tree.column("qty", width=60, anchor="center")
        self.order_tree.column("price", width=80, anchor="e")
        self.order_tree.pack(fill="both", expand=True, padx=5, pady=5)
        self.order_tree.bind("<Double-1>", self.gui_remove_row)

        ttk.Button(order_box, text="Order Now", command=self.gui_submit).pack(pady=(0, 5))

        self._swap_frame(frame)
        self.reset_form()

    def select_pizza(self, pizza_type: str):
        self.selected_type.set(pizza_type)
        toppings = base_toppings_for(self.menu, pizza_type)
        if len(toppings) > 1:
            text = "with " + ", ".join(toppings[:-1]) + " and " + toppings[-1]
        else:
            text = "with " + "".join(toppings)
        self.base_toppings_text.set(text)

    def toggle_extras(self):
        if self.customize_var.get():
            for check in self.extra_checks:
                check.state(["!disabled"])
        else:
            self.clear_extras()

    def clear_extras(self):
        for var in self.extra_vars.values():
            var.set(False)
        for check in self.extra_checks:
            check.state(["disabled"])

    def reset_form(self):
        self.select_pizza(next(iter(self.menu["pizzas"])))
        self.size_var.set(self.menu["sizes"][0])
        self.customize_var.set(False)
        self.clear_extras()
        self.qty_combo.current(0)

    def refresh_order_table(self):
        for row in self.order_tree.get_children():
            self.order_tree.delete(row)

        for item in self.order_service.session.cart.rows:
            self.order_tree.insert(
                "",
                "end",
                values=(
                    item.type,
                    item.size,
                    ", ".join(item.toppings),
                    item.quantity,
                    f"{item.unit_price}"
                )
            )

    def gui_add_to_order(self):
        extras = [name for name, var in self.extra_vars.items() if var.get()]
        row = self.order_service.add_pizza(
            self.selected_type.get(),
            self.size_var.get(),
            int(self.qty_combo.get()),
            customize=self.customize_var.get(),
            extras=extras,
        )
        if row is None:
            return

        self.logger.info(f"GUI: added {row.type} x {row.quantity} to order list")
        self.refresh_order_table()
        self.reset_form()

    def gui_remove_row(self, event):
        item_id = self.order_tree.identify_row(event.y)
        if not item_id:
            messagebox.showwarning("Warning", "Please select a Pizza")
            return

        if not messagebox.askyesno("Confirmation", "Do you want to remove this Pizza Order?"):
            return

        index = self.order_tree.index(item_id)
        if self.order_service.remove_row(index):
            self.refresh_order_table()
            messagebox.showinfo("Success", "Pizza Order removed!")

    def gui_submit(self):
        outcome = self.order_service.submit()
        self.logger.info(f"GUI: order submitted, outcome={outcome.value}")
        self.refresh_order_table()


def main():
    root = tk.Tk()
    app = PizzaShopApp(root)
    root.mainloop()


if __name__ == "__main__":
    main()
