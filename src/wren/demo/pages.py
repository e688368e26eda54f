"""Demo pages — one per widget, wired onto a Shell.

Page state (the selected dropdown options, the open modal, the table
sort directives) lives on ``DemoPages`` so it survives navigation away
and back, like components kept alive above the router.
"""

import html
import logging
from datetime import date

from kida.template import Markup

from wren._internal.types import Row
from wren.components.events import ActivationEvent
from wren.demo import data
from wren.shell import Shell
from wren.table.view import TableView
from wren.widgets.accordion import Accordion, AccordionItem
from wren.widgets.button import Button
from wren.widgets.counter import Counter
from wren.widgets.dropdown import CustomDropdown, Dropdown, DropdownConfig, Option
from wren.widgets.modal import Modal

logger = logging.getLogger("wren.demo")

STATUS_STYLES = {
    "In Progress": "bg-blue-200 text-blue-800",
    "Planning": "bg-purple-200 text-purple-800",
    "Completed": "bg-green-200 text-green-800",
    "On Hold": "bg-yellow-200 text-yellow-800",
}

PRIORITY_STYLES = {
    "Low": "bg-gray-200 text-gray-800",
    "Medium": "bg-blue-200 text-blue-800",
    "High": "bg-orange-200 text-orange-800",
    "Critical": "bg-red-200 text-red-800",
}


def _pill(text: object, styles: dict[str, str]) -> Markup:
    label = str(text)
    classes = f"px-2 py-1 rounded-full text-xs font-medium {styles.get(label, '')}".strip()
    return Markup(f'<span class="{classes}">{html.escape(label)}</span>')


def format_deadline(row: Row) -> str:
    d = date.fromisoformat(str(row["deadline"]))
    return f"{d:%b} {d.day}, {d.year}"


def format_budget(row: Row) -> str:
    return f"${row['budget']:,}"


def contact_link(row: Row) -> Markup:
    # Stops propagation so following the link does not activate the row.
    address = html.escape(str(row["contact"]))
    return Markup(
        f'<a href="mailto:{address}" class="text-blue-600 hover:underline" '
        f'onclick="event.stopPropagation()">{address}</a>'
    )


def experience(row: Row) -> Markup:
    years = int(row["yearsOfService"])
    dots = '<span class="inline-block w-3 h-3 rounded-full bg-green-500 mr-1"></span>' * years
    unit = "year" if years == 1 else "years"
    return Markup(
        f'<div class="flex items-center"><div class="mr-2">{dots}</div>'
        f'<span class="text-sm text-gray-600">{years} {unit}</span></div>'
    )


def skill_stars(row: Row) -> Markup:
    level = int(row["skillLevel"])
    stars = "".join(
        f'<span class="inline-block text-lg {"text-yellow-500" if i < level else "text-gray-300"}">★</span>'
        for i in range(5)
    )
    return Markup(f"<div>{stars}</div>")


PROJECT_HEADERS = [
    {"column": "Project ID", "key": "id", "sort": True},
    {"column": "Project Name", "key": "name", "sort": True},
    {"column": "Project Manager", "key": "manager", "sort": True},
    {"column": "Status", "key": "status", "sort": True,
     "render": lambda row: _pill(row["status"], STATUS_STYLES)},
    {"column": "Deadline", "key": "deadline", "sort": True, "render": format_deadline},
    {"column": "Budget", "key": "budget", "sort": True, "render": format_budget},
    {"column": "Priority", "key": "priority", "sort": True,
     "render": lambda row: _pill(row["priority"], PRIORITY_STYLES)},
]

TEAM_HEADERS = [
    {"column": "ID", "key": "id", "sort": True},
    {"column": "Name", "key": "name", "sort": True},
    {"column": "Role", "key": "role", "sort": True},
    {"column": "Department", "key": "department", "sort": True},
    {"column": "Contact", "key": "contact", "sort": True, "render": contact_link},
    {"column": "Location", "key": "location", "sort": True},
    {"column": "Experience", "key": "yearsOfService", "sort": True, "render": experience},
    {"column": "Skill Level", "key": "skillLevel", "sort": True, "render": skill_stars},
]


class DemoPages:
    """Widget instances behind each demo route."""

    def __init__(self) -> None:
        self.color: Option | None = None
        self.size: Option | None = None
        self.color_dropdown = Dropdown(
            DropdownConfig.build("color", "Choose a color", data.COLOR_OPTIONS),
            on_change=self._set_color,
        )
        self.size_dropdown = CustomDropdown(
            DropdownConfig.build("size", "Select size", data.SIZE_OPTIONS),
            on_change=self._set_size,
        )
        self.accordion = Accordion([AccordionItem(label, content) for label, content in data.ACCORDION_ITEMS])
        self.modal = Modal(
            Markup("<p>Here is an important agreement for you to accept</p>"),
            action_bar=Button("I Accept", variant="primary").render(),
            on_close=self.close_modal,
        )
        self.counter = Counter(initial_count=10)
        self.row_clicks: list[tuple[str, int]] = []
        self.projects = TableView(
            PROJECT_HEADERS,
            data.PROJECTS,
            title="Project Management Dashboard",
            table_id="project-table",
            styles={"header_row": "bg-indigo-300", "body_row": "bg-indigo-50 hover:bg-indigo-100",
                    "title": "text-indigo-800"},
            on_row_click=self._project_clicked,
        )
        self.team = TableView(
            TEAM_HEADERS,
            data.TEAM,
            title="Team Member Directory",
            table_id="team-table",
            styles={"header_row": "bg-emerald-300", "body_row": "bg-emerald-50 hover:bg-emerald-100",
                    "title": "text-emerald-800"},
            on_row_click=self._team_member_clicked,
        )

    # -- Handlers --

    def _set_color(self, option: Option | None) -> None:
        self.color = option
        self.color_dropdown.value = option
        logger.info("Selected value: %s", option.label if option else None)

    def _set_size(self, option: Option | None) -> None:
        self.size = option
        logger.info("Selected value: %s", option.label if option else None)

    def open_modal(self) -> None:
        self.modal.open()

    def close_modal(self) -> None:
        self.modal.close()

    def _project_clicked(self, row: Row, index: int) -> None:
        logger.info("Project Row %d clicked: %s", index, row["id"])
        self.row_clicks.append(("project", index))

    def _team_member_clicked(self, row: Row, index: int) -> None:
        logger.info("Contact %s at %s", row["name"], row["contact"])
        self.row_clicks.append(("team", index))

    def click_contact(self, index: int) -> bool:
        """Click the mailto link inside a team row; the row must not activate."""
        event = ActivationEvent()
        event.stop_propagation()
        return self.team.click_row(index, event)

    # -- Pages --

    def dropdown_page(self) -> Markup:
        return Markup(
            '<div class="flex inline-grid grid-cols-1 place-items-center space-y-5">'
            f"{self.color_dropdown.render()}{self.size_dropdown.render()}</div>"
        )

    def accordion_page(self) -> Markup:
        return Markup(f"<div>{self.accordion.render()}</div>")

    def button_page(self) -> Markup:
        buttons = [
            Button("Buy Now!", variant="primary", rounded=True),
            Button("Hide Ads!", variant="danger", outline=True),
            Button("See Deal!", variant="warning"),
            Button("Something!", variant="secondary", outline=True),
            Button("Success!", variant="success", rounded=True, outline=True),
        ]
        return Markup("".join(f'<div class="m-2">{b.render()}</div>' for b in buttons))

    def modal_page(self) -> Markup:
        trigger = Button("Open Modal", variant="primary").render()
        return Markup(f'<div class="relative">{trigger}{self.modal.render()}</div>')

    def table_page(self) -> Markup:
        return Markup(
            '<div class="p-4 space-y-8">'
            '<h1 class="text-2xl font-bold mb-4">Table Examples with Sorting</h1>'
            f'<div class="bg-white p-4 rounded-lg shadow">{self.projects.render()}</div>'
            f'<div class="bg-white p-4 rounded-lg shadow">{self.team.render()}</div>'
            "</div>"
        )

    def counter_page(self) -> Markup:
        return self.counter.render()

    def register(self, shell: Shell) -> Shell:
        shell.add_route("/", self.dropdown_page, name="dropdown", label="Dropdown")
        shell.add_route("/accordion", self.accordion_page, name="accordion", label="Accordion")
        shell.add_route("/button", self.button_page, name="button", label="Buttons")
        shell.add_route("/modal", self.modal_page, name="modal", label="Modal")
        shell.add_route("/table", self.table_page, name="table", label="Table")
        shell.add_route("/counter", self.counter_page, name="counter", label="Counter")
        return shell
