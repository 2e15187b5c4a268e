"""
Render the widget state to HTML with the package's Jinja2 templates.
"""
from jinja2 import Environment, PackageLoader, select_autoescape

from booking_widget.views import ListSection, NotificationBanner, BookingForm, WidgetState

env = Environment(
    loader=PackageLoader("booking_widget", "templates"),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_rooms(section: ListSection) -> str:
    return env.get_template("rooms.html").render(section=section)


def render_bookings(section: ListSection) -> str:
    return env.get_template("bookings.html").render(section=section)


def render_form(form: BookingForm) -> str:
    return env.get_template("booking_form.html").render(form=form)


def render_notification(banner: NotificationBanner) -> str:
    return env.get_template("notification.html").render(banner=banner)


def render_page(state: WidgetState, api_url: str = "") -> str:
    return env.get_template("page.html").render(state=state, api_url=api_url)
