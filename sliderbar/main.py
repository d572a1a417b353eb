#!/usr/bin/env python3

import gi
gi.require_version('Gtk', '4.0')
gi.require_version('Adw', '1')
from gi.repository import Gtk, Adw, Gio
from sliderbar.sliderbar import SliderBar
from sliderbar.utils import clear_css, load_css


class SliderBarWindow(Adw.ApplicationWindow):
    def __init__(self, app, ranges=None):
        super().__init__(application=app)
        self.set_default_size(480, 240)

        main_box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL)
        self.headerbar = Adw.HeaderBar()

        self.style = Adw.StyleManager.get_default()
        self.style.connect("notify::dark", self.on_color_scheme_change)

        self.menu_button = Gtk.MenuButton()
        self.menu_button.set_icon_name("open-menu-symbolic")
        self.menu_model = Gio.Menu()
        self.menu_model.append("New Window", "app.new_window")
        self.menu_model.append("Help", "app.help")
        self.menu_button.set_menu_model(self.menu_model)
        self.headerbar.pack_end(self.menu_button)

        label = Gtk.Label()
        label.set_markup('<b>SliderBar</b>')
        self.headerbar.set_title_widget(label)
        main_box.append(self.headerbar)

        content_box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=20)
        content_box.set_vexpand(True)
        content_box.set_valign(Gtk.Align.CENTER)
        load_css(content_box, ["slider-box"])

        # Labels showing the current min and max
        labels_box = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=40)
        labels_box.set_halign(Gtk.Align.CENTER)
        self.label_min = Gtk.Label()
        self.label_max = Gtk.Label()
        labels_box.append(self.label_min)
        labels_box.append(self.label_max)
        content_box.append(labels_box)

        self.slider_bar = SliderBar(ranges=ranges)
        self.slider_bar.set_hexpand(True)
        self.slider_bar.connect('slider-changed', lambda _, min_value, max_value:
                                self.on_changed(min_value, max_value))
        content_box.append(self.slider_bar)

        main_box.append(content_box)
        self.set_content(main_box)

        self.update_theme(self.style.get_dark())

    def on_changed(self, min_value, max_value):
        self.label_min.set_text(str(min_value))
        self.label_max.set_text(str(max_value))

    def update_theme(self, is_dark):
        """Update theme for all components"""
        clear_css(self.headerbar)
        self.headerbar.add_css_class("headerbar-dark" if is_dark else "headerbar-light")
        for label in (self.label_min, self.label_max):
            clear_css(label)
            label.add_css_class("value-label")
            label.add_css_class("value-label-dark" if is_dark else "value-label-light")
        self.slider_bar.update_theme(is_dark)

    def on_color_scheme_change(self, style_manager, pspec):
        """Handle system color scheme changes"""
        self.update_theme(style_manager.get_dark())


class SliderBarApplication(Adw.Application):
    def __init__(self, ranges=None):
        super().__init__(application_id="io.github.sliderbar")
        self.ranges = ranges

        new_window_action = Gio.SimpleAction.new("new_window", None)
        new_window_action.connect("activate", self.on_new_window)
        self.add_action(new_window_action)

        help_action = Gio.SimpleAction.new("help", None)
        help_action.connect("activate", self.on_help)
        self.add_action(help_action)

        quit_action = Gio.SimpleAction.new("quit", None)
        quit_action.connect("activate", lambda *_: self.quit())
        self.add_action(quit_action)
        self.set_accels_for_action("app.quit", ["<Ctrl>q"])

    def do_activate(self):
        win = SliderBarWindow(self, self.ranges)
        win.present()

    def on_new_window(self, action, parameter):
        win = SliderBarWindow(self, self.ranges)
        win.present()

    def on_help(self, action, parameter):
        """Show help dialog about the thumbs"""
        window = self.get_active_window()

        dialog = Adw.AlertDialog.new("Help", None)
        label = Gtk.Label(
            label=
            "• Drag either thumb to change the range.\n\n" +
            "• Released thumbs settle on the closest allowed value.\n\n" +
            "• Dropping one thumb onto the other puts it back\n"
            "  where the drag started.\n"
        )
        label.set_justify(Gtk.Justification.LEFT)
        dialog.set_extra_child(label)

        dialog.add_response("ok", "OK")
        dialog.set_default_response("ok")
        dialog.set_close_response("ok")

        dialog.present(window)


def main():
    app = SliderBarApplication()
    return app.run(None)


if __name__ == "__main__":
    main()
