"""
Admin store: authentication lifecycle and document mutations.

This service owns the in-memory document while an operator is logged in:
- login / session restore / logout (Anonymous <-> Authenticated)
- entry CRUD with the id and single-hero rules (via PortfolioDocument)
- whole-document save back to the remote store

Every operation returns an ActionResult; collaborator errors are caught,
logged and exposed through ``error`` for the presentation layer.
"""

from collections.abc import Callable

from gistfolio.application.interfaces import (
    IDocumentStore,
    ISessionHolder,
    IVideoMetadataProvider,
)
from gistfolio.application.services.results import ActionResult
from gistfolio.domain.entities import (
    AboutData,
    Document,
    Entry,
    EntryDraft,
    GlobalSettings,
    PortfolioDocument,
)
from gistfolio.domain.enums import ActionStatus, AuthState
from gistfolio.domain.exceptions import (
    AuthenticationError,
    EntryNotFoundError,
    GistfolioException,
    NotAuthenticatedError,
    NotFoundError,
    UserCancelledError,
)
from gistfolio.infrastructure.exceptions import PermissionDeniedError, PrivacyRestrictedError
from gistfolio.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

AUTH_ERROR_MESSAGE = "Invalid access token"
SAVE_ERROR_MESSAGE = "Failed to save changes"


class AdminStore:
    """
    Authenticated mutation engine over the portfolio document.

    A generation counter is bumped on every login attempt and logout; an
    async login or save whose generation is no longer current when it
    resumes is discarded, so a late response can never resurrect a document
    or leak an error into a later session. Saves are not serialized:
    overlapping saves race and the last response wins.
    """

    def __init__(
        self,
        document_store: IDocumentStore,
        session_holder: ISessionHolder,
        video_provider: IVideoMetadataProvider,
        on_logout: Callable[[], None] | None = None,
    ) -> None:
        self.document_store = document_store
        self.session_holder = session_holder
        self.video_provider = video_provider
        self.on_logout = on_logout

        self.state = AuthState.ANONYMOUS
        self.loading = False
        self.error: str | None = None

        self._credential: str | None = None
        self._document = PortfolioDocument()
        self._generation = 0
        self._saves_in_flight = 0

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def is_authenticated(self) -> bool:
        return self.state == AuthState.AUTHENTICATED

    @property
    def entries(self) -> list[Entry]:
        return list(self._document.entries)

    @property
    def about(self) -> AboutData | None:
        return self._document.about

    @property
    def settings(self) -> GlobalSettings | None:
        return self._document.settings

    @property
    def featured_entry(self) -> Entry | None:
        return self._document.featured_entry

    @property
    def document(self) -> Document:
        """Deep copy of the current in-memory document"""
        return self._document.to_document()

    # ------------------------------------------------------------------
    # Authentication lifecycle
    # ------------------------------------------------------------------

    async def login(self, token: str) -> ActionResult:
        """
        Verify ownership, store the credential and load the document.

        On any failure the store is reset to Anonymous with no credential
        and an empty document.
        """
        generation = self._next_generation()
        self.loading = True
        self.error = None

        try:
            if not token or not await self.document_store.verify_permission(token):
                raise PermissionDeniedError(
                    "Token does not own the portfolio document", resource="gist"
                )
            if not self._is_current(generation):
                return self._stale("login")

            self._credential = token
            self.session_holder.save(token)
            document = await self.document_store.fetch_document(token)
        except Exception as e:
            if not self._is_current(generation):
                return self._stale("login")
            if isinstance(e, GistfolioException):
                logger.warning("Login failed: %s", e.message)
            else:
                logger.exception("Unexpected error during login")
            self._reset()
            self.loading = False
            self.error = AUTH_ERROR_MESSAGE
            return ActionResult.failure(ActionStatus.AUTH_FAILED, AuthenticationError(AUTH_ERROR_MESSAGE))

        if not self._is_current(generation):
            return self._stale("login")

        self._document = PortfolioDocument.from_document(document)
        self.state = AuthState.AUTHENTICATED
        self.loading = False
        logger.info("Admin authenticated (%d entries loaded)", len(self._document.entries))
        return ActionResult.success()

    async def restore_session(self) -> ActionResult:
        """Log in with a stored credential, if there is one"""
        token = self.session_holder.load()
        if not token:
            return ActionResult.failure(ActionStatus.NOT_AUTHENTICATED)

        result = await self.login(token)
        if result.status == ActionStatus.AUTH_FAILED:
            # Expired or revoked; do not retry it on the next restore
            self.session_holder.clear()
            logger.info("Stored session rejected, cleared")
        return result

    def logout(self) -> ActionResult:
        self._next_generation()
        self._reset()
        self.loading = False
        self.error = None
        logger.info("Admin logged out")
        if self.on_logout:
            self.on_logout()
        return ActionResult.success()

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_entry(self, draft: EntryDraft) -> ActionResult:
        if not self.is_authenticated:
            return self._not_authenticated("add_entry")
        entry = self._document.add_entry(draft)
        logger.debug("Added entry %s", entry.id)
        return ActionResult.success(entry)

    def update_entry(self, entry: Entry) -> ActionResult:
        if not self.is_authenticated:
            return self._not_authenticated("update_entry")
        try:
            updated = self._document.update_entry(entry)
        except EntryNotFoundError as e:
            return self._not_found(e)
        return ActionResult.success(updated)

    def remove_entry(self, entry_id: int, confirm: Callable[[Entry], bool]) -> ActionResult:
        """
        Remove an entry after the caller confirms it.

        Args:
            entry_id: Id of the entry to remove
            confirm: Called with the entry; a falsy answer cancels the removal
        """
        if not self.is_authenticated:
            return self._not_authenticated("remove_entry")
        try:
            entry = self._document.get_entry(entry_id)
        except EntryNotFoundError as e:
            return self._not_found(e)

        if not confirm(entry):
            return ActionResult.failure(
                ActionStatus.CANCELLED, UserCancelledError(f"remove entry {entry_id}")
            )

        removed = self._document.remove_entry(entry_id)
        logger.debug("Removed entry %s", entry_id)
        return ActionResult.success(removed)

    def reorder_entries(self, new_order: list[Entry]) -> ActionResult:
        """Replace the entry order; new_order should be a permutation of the entries"""
        if not self.is_authenticated:
            return self._not_authenticated("reorder_entries")
        if not self._document.is_permutation(new_order):
            logger.warning(
                "Reorder is not a permutation of current entries (%d -> %d)",
                len(self._document.entries),
                len(new_order),
            )
        self._document.reorder(new_order)
        return ActionResult.success()

    def update_about(self, about: AboutData | None) -> ActionResult:
        if not self.is_authenticated:
            return self._not_authenticated("update_about")
        self._document.replace_about(about)
        return ActionResult.success(about)

    def update_settings(self, settings: GlobalSettings | None) -> ActionResult:
        if not self.is_authenticated:
            return self._not_authenticated("update_settings")
        self._document.replace_settings(settings)
        return ActionResult.success(settings)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    async def save(self) -> ActionResult:
        """
        Persist the whole in-memory document.

        Failure keeps local state and authentication intact, so the
        operator can retry. A save that resolves after logout or a new
        login is reported as stale and leaves ``error`` and ``loading``
        to the current session.
        """
        if not self.is_authenticated:
            return self._not_authenticated("save")

        generation = self._generation
        snapshot = self._document.to_document()
        if self._saves_in_flight:
            logger.warning("Save started while %d save(s) in flight; last write wins",
                           self._saves_in_flight)
        self._saves_in_flight += 1
        self.loading = True
        self.error = None

        try:
            ack = await self.document_store.persist_document(snapshot, self._credential)
        except Exception as e:
            if not self._is_current(generation):
                return self._stale("save")
            if isinstance(e, GistfolioException):
                logger.error(f"Save failed: {e.message}")
                error = e
            else:
                logger.exception("Unexpected error during save")
                error = GistfolioException(str(e))
            self.error = SAVE_ERROR_MESSAGE
            return ActionResult.failure(ActionStatus.FAILED, error)
        finally:
            if self._is_current(generation):
                self._saves_in_flight -= 1
                self.loading = self._saves_in_flight > 0

        if not self._is_current(generation):
            return self._stale("save")

        logger.info("Saved %d entries", len(snapshot.entries))
        return ActionResult.success(ack)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    async def fetch_video_metadata(self, video_ref: str) -> ActionResult:
        """Look up video title/thumbnail to prefill an entry; never mutates the document"""
        self.loading = True
        try:
            metadata = await self.video_provider.fetch_metadata(video_ref)
        except NotFoundError as e:
            self.error = "Video ID not found"
            return ActionResult.failure(ActionStatus.NOT_FOUND, e)
        except PrivacyRestrictedError as e:
            self.error = "Video is private or restricted"
            return ActionResult.failure(ActionStatus.PRIVACY_RESTRICTED, e)
        except GistfolioException as e:
            logger.warning(f"Video lookup failed: {e.message}")
            self.error = "Video lookup failed"
            return ActionResult.failure(ActionStatus.FAILED, e)
        finally:
            self.loading = False
        return ActionResult.success(metadata)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _next_generation(self) -> int:
        self._generation += 1
        # saves from the previous generation no longer count towards loading
        self._saves_in_flight = 0
        return self._generation

    def _is_current(self, generation: int) -> bool:
        return generation == self._generation

    def _reset(self) -> None:
        self._credential = None
        self.session_holder.clear()
        self._document = PortfolioDocument()
        self.state = AuthState.ANONYMOUS

    def _stale(self, action: str) -> ActionResult:
        logger.debug("Discarding stale %s result", action)
        return ActionResult.failure(ActionStatus.STALE)

    def _not_authenticated(self, action: str) -> ActionResult:
        return ActionResult.failure(ActionStatus.NOT_AUTHENTICATED, NotAuthenticatedError(action))

    def _not_found(self, error: NotFoundError) -> ActionResult:
        self.error = error.message
        return ActionResult.failure(ActionStatus.NOT_FOUND, error)
