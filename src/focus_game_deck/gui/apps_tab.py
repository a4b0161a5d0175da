"""Managed Apps tab: list of companion apps and the app form"""

from typing import Optional

from ..config.schema import ActionVerb, TerminationMethod
from ..core.binding import app_to_form, save_app
from ..core.form import Field, FormInput
from ..core.messages import OperationResult
from .entity_tab import EntityTab
from .form_panel import FormPanel


class AppForm(FormPanel):
    """Form for a single managed app."""

    def __init__(self, master, **kwargs):
        super().__init__(master, **kwargs)

        section = self.add_section("Application")
        self.add_entry(section, Field.APP_ID, "App ID:")
        self.add_entry(section, Field.APP_DISPLAY_NAME, "Display name:")
        self.add_entry(section, Field.APP_COMMENT, "Comment:")
        self.add_path(section, Field.APP_PATH, "Executable:")
        self.add_path(section, Field.APP_WORKING_DIRECTORY, "Working directory:", directory=True)
        self.add_entry(section, Field.APP_PROCESS_NAME, "Process names (a|b):")
        self.add_entry(section, Field.APP_ARGUMENTS, "Arguments:")

        section = self.add_section("Actions")
        verbs = [verb.value for verb in ActionVerb]
        self.add_option(section, Field.GAME_START_ACTION, "On game start:", verbs)
        self.add_option(section, Field.GAME_END_ACTION, "On game end:", verbs)
        self.add_option(
            section, Field.TERMINATION_METHOD, "Termination:", [method.value for method in TerminationMethod]
        )
        self.add_entry(section, Field.GRACEFUL_TIMEOUT_SECONDS, "Graceful timeout (s):")


class AppsTab(EntityTab):
    list_title = "Managed Apps"
    entity_label = "app"

    def create_form(self, master) -> FormPanel:
        return AppForm(master)

    def list_items(self) -> list[tuple[str, str]]:
        return [(app_id, app.display_name or app_id) for app_id, app in self.state.document.managed_apps.items()]

    def selected_id(self) -> Optional[str]:
        return self.state.session.selected_app_id

    def select(self, entity_id: Optional[str]) -> bool:
        return self.state.select_app(entity_id)

    def entity_form(self, entity_id: str) -> FormInput:
        return app_to_form(entity_id, self.state.document.managed_apps.get(entity_id))

    def delete_prompt(self, entity_id: str) -> str:
        users = self.state.document.games_referencing(entity_id)
        if users:
            return f"Delete '{entity_id}'? It will also be removed from: {', '.join(users)}."
        return super().delete_prompt(entity_id)

    def add(self) -> OperationResult:
        return self.state.add_app()

    def delete(self, entity_id: str) -> OperationResult:
        return self.state.delete_app(entity_id)

    def move(self, entity_id: str, offset: int) -> OperationResult:
        return self.state.move_app(entity_id, offset)

    def apply(self, form: FormInput) -> OperationResult:
        return save_app(self.state, form)
