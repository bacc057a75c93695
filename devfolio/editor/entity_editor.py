from typing import Awaitable, Callable

from pydantic import ValidationError
from pydantic.alias_generators import to_snake

from devfolio.common.constants import EditorState, PortfolioTable
from devfolio.common.exceptions import EntityNotFoundError, EntityStoreError
from devfolio.editor.editor_forms import form_class_for, to_form_values


def _validation_message(error: ValidationError) -> str:
    first_error = error.errors()[0]
    location = ".".join(str(part) for part in first_error.get("loc", ())) or "form"
    return f"{location}: {first_error.get('msg')}"


class EntityEditor:
    """
    Editor for one row of a portfolio section.

    States move closed -> editing (open) -> submitting (submit) and then
    either back to closed on success, after awaiting the `on_saved` refresh,
    or back to editing with the submitted values kept and the error recorded.
    """

    def __init__(
        self,
        table: PortfolioTable,
        owner_id: str,
        command_service,
        logger,
        on_saved: Callable[[], Awaitable[None]] | None = None,
    ):
        self.table = PortfolioTable(table)
        self.owner_id = owner_id
        self.command_service = command_service
        self.logger = logger
        self.on_saved = on_saved

        self.state = EditorState.CLOSED
        self.entity_id: str | None = None
        self.values: dict = {}
        self.error: str | None = None
        self.failure: Exception | None = None
        self.saved = None

    @property
    def is_new(self) -> bool:
        return self.entity_id is None

    def open(self, existing=None) -> dict:
        """
        Open the editor, blank for a new row or loaded from `existing`.

        Returns:
            dict: The form values shown to the user.
        """
        self.entity_id = getattr(existing, "id", None)
        self.values = to_form_values(self.table, existing)
        self.error = None
        self.failure = None
        self.saved = None
        self.state = EditorState.EDITING
        return self.values

    def close(self):
        self.state = EditorState.CLOSED
        self.error = None
        self.failure = None

    async def submit(self, values: dict | None = None) -> bool:
        """
        Validate the form and write it to the Entity Store.

        Args:
            values (dict | None): Submitted form values (snake_case or camelCase
                keys); they are merged over the values loaded by `open`.

        Returns:
            bool: True when the row was saved and the editor closed.

        Raises:
            ValueError: If the editor is not open for editing.
        """
        if self.state != EditorState.EDITING:
            raise ValueError(f"Cannot submit an editor that is {self.state.value}")

        submitted = {to_snake(key): value for key, value in (values or {}).items()}
        self.values = {**self.values, **submitted}
        self.state = EditorState.SUBMITTING
        self.error = None
        self.failure = None

        try:
            request = form_class_for(self.table).model_validate(self.values)
            self.saved = await self._persist(request)
        except ValidationError as e:
            return self._fail(e, _validation_message(e))
        except (EntityStoreError, EntityNotFoundError, ValueError) as e:
            return self._fail(e, str(e))

        self.state = EditorState.CLOSED
        if self.is_new:
            self.values = to_form_values(self.table)

        if self.on_saved is not None:
            await self.on_saved()
        return True

    def snapshot(self) -> dict:
        """Serializable view of the editor for inline display."""
        return {
            "section": self.table.value,
            "state": self.state.value,
            "entityId": self.entity_id,
            "values": dict(self.values),
            "error": self.error,
        }

    async def _persist(self, request):
        return await self.command_service.save(
            self.table, self.owner_id, request, entity_id=self.entity_id
        )

    def _fail(self, failure: Exception, message: str) -> bool:
        self.logger.warning(
            "[EntityEditor] saving %s for owner %s failed: %s",
            self.table.value,
            self.owner_id,
            message,
        )
        self.failure = failure
        self.error = message
        self.state = EditorState.EDITING
        return False


class ProfileEditor(EntityEditor):
    """Profile tab editor; saving upserts the owner's single profile row."""

    def __init__(self, owner_id: str, command_service, logger, on_saved=None):
        super().__init__(
            PortfolioTable.PROFILES,
            owner_id,
            command_service,
            logger,
            on_saved=on_saved,
        )

    @property
    def is_new(self) -> bool:
        return False

    def open(self, existing=None, default_email: str = "") -> dict:
        values = super().open(existing)
        if not values.get("email"):
            values["email"] = default_email
        return values

    async def _persist(self, request):
        return await self.command_service.save_profile(self.owner_id, request)
