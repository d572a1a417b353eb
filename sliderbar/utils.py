import os
import gi
gi.require_version('Gtk', '4.0')
gi.require_version('Gdk', '4.0')
from gi.repository import Gtk, Gdk, GLib

CSS_FILES = [
    'headerbar.css',
    'value-label.css',
    'slider-box.css',
]


def load_css(target, css_classes=None):
    """
    Load CSS styles from the style directory

    Args:
        target: Widget to add CSS classes to, or Display to load CSS provider for
        css_classes: List of CSS classes to add to the widget
    """
    def try_load_css_files(style_dir):
        if not os.path.exists(style_dir):
            return None

        css_data = []
        for css_file in CSS_FILES:
            file_path = os.path.join(style_dir, css_file)
            if os.path.exists(file_path):
                with open(file_path, 'r', encoding='utf-8') as f:
                    css_data.append(f.read())

        return '\n'.join(css_data) if css_data else None

    css_provider = Gtk.CssProvider()

    try:
        current_dir = os.path.dirname(os.path.abspath(__file__))
        style_dir = os.path.join(current_dir, 'style')
        css_data = try_load_css_files(style_dir)
        if not css_data:
            raise FileNotFoundError(f"CSS files not found in: {style_dir}")

        css_provider.load_from_bytes(GLib.Bytes.new(css_data.encode('utf-8')))

        if isinstance(target, Gdk.Display):
            display = target
        else:
            display = Gdk.Display.get_default()
        Gtk.StyleContext.add_provider_for_display(
            display,
            css_provider,
            Gtk.STYLE_PROVIDER_PRIORITY_APPLICATION
        )

        if isinstance(target, Gtk.Widget) and css_classes:
            for css_class in css_classes:
                target.add_css_class(css_class)

    except Exception as e:
        print(f"Error loading CSS: {e}")


def clear_css(widget):
    """
    Remove all CSS classes from a widget
    """
    if widget:
        for css_class in widget.get_css_classes():
            widget.remove_css_class(css_class)
