"""Unit tests for CommentsSection."""

import pytest

from discuss.adapter.error import RemoteError
from discuss.adapter.session import LocalSession
from discuss.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from discuss.domain.service import REMOVED_PLACEHOLDER
from discuss.domain.value import CommentId, SortField, SortOrder
from discuss.interface.view import CommentsSection
from discuss.persistence.inmemory import InMemoryCommentSource
from tests.conftest import ALICE, BOB, ITEM_ID, make_comment
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def seed(unit_env, count: int) -> InMemoryCommentSource:
    source = await unit_env.get(InMemoryCommentSource)
    for minute in range(count):
        source.add(make_comment(f"c{minute:02d}", author=BOB, minutes=minute))
    return source


class TestPagination:
    """Tests for paging and sorting."""

    @pytest.mark.asyncio
    async def test_first_load_uses_defaults(self, unit_env):
        await seed(unit_env, 45)
        section = await CommentsSection.from_container(unit_env, ITEM_ID)

        page = await section.load()

        assert (page.page, page.limit, page.total, page.total_pages) == (1, 20, 45, 3)
        # Newest first
        assert page.comments[0].id == "c44"
        assert section.has_more

    @pytest.mark.asyncio
    async def test_load_more_stops_at_last_page(self, unit_env):
        source = await seed(unit_env, 45)
        section = await CommentsSection.from_container(unit_env, ITEM_ID)
        await section.load()

        assert await section.load_more()
        assert await section.load_more()
        assert section.page.page == 3
        assert len(section.page.comments) == 5

        calls = len(source.calls)
        assert not await section.load_more()
        assert len(source.calls) == calls
        assert section.query.page == 3

    @pytest.mark.asyncio
    async def test_sort_change_resets_to_first_page(self, unit_env):
        await seed(unit_env, 45)
        section = await CommentsSection.from_container(unit_env, ITEM_ID)
        await section.load()
        await section.load_more()

        await section.set_sort_order(SortOrder.ASC)

        assert section.query.page == 1
        assert section.page.page == 1
        assert section.page.comments[0].id == "c00"

    @pytest.mark.asyncio
    async def test_sort_field_change_resets_to_first_page(self, unit_env):
        await seed(unit_env, 25)
        section = await CommentsSection.from_container(unit_env, ITEM_ID)
        await section.load()
        await section.load_more()

        await section.set_sort_by(SortField.UPDATED_AT)

        assert section.query.page == 1
        assert section.query.sort_by == SortField.UPDATED_AT

    @pytest.mark.asyncio
    async def test_empty_thread(self, unit_env):
        section = await CommentsSection.from_container(unit_env, ITEM_ID)

        page = await section.load()

        assert page.total == 0
        assert section.nodes() == []
        assert not section.has_more
        assert not await section.load_more()


class TestSubmit:
    """Tests for posting from the section."""

    @pytest.mark.asyncio
    async def test_submit_reloads_with_new_comment(self, unit_env):
        session = await unit_env.get(LocalSession)
        session.sign_in(ALICE)
        await seed(unit_env, 1)
        section = await CommentsSection.from_container(unit_env, ITEM_ID)
        await section.load()

        comment = await section.submit("Brand new")

        assert section.page.total == 2
        assert section.page.comments[0].id == comment.id

    @pytest.mark.asyncio
    async def test_reply_closes_reply_form(self, unit_env):
        session = await unit_env.get(LocalSession)
        session.sign_in(ALICE)
        await seed(unit_env, 1)
        section = await CommentsSection.from_container(unit_env, ITEM_ID)
        await section.load()
        section.ui_state.open_reply_form(CommentId("c00"))

        await section.submit("A reply", parent_id=CommentId("c00"))

        assert not section.ui_state.get(CommentId("c00")).reply_form_open
        [node] = section.nodes()
        assert len(node.children) == 1

    @pytest.mark.asyncio
    async def test_failed_optimistic_submit_removes_pending_entry(self, unit_env):
        await seed(unit_env, 1)
        section = await CommentsSection.from_container(unit_env, ITEM_ID)
        await section.load()

        # Signed out: the server rejects the post
        with pytest.raises(RemoteError):
            await section.submit("Never lands", optimistic=True)

        assert section.page.pending == []
        assert section.page.total == 1
        assert [n.id for n in section.nodes()] == ["c00"]

    @pytest.mark.asyncio
    async def test_optimistic_entry_is_replaced_on_success(self, unit_env):
        session = await unit_env.get(LocalSession)
        session.sign_in(ALICE)
        section = await CommentsSection.from_container(unit_env, ITEM_ID)
        await section.load()

        comment = await section.submit("Shows up at once", optimistic=True)

        assert section.page.pending == []
        assert [n.id for n in section.nodes()] == [comment.id]
        assert not section.nodes()[0].pending


class TestEditAndDelete:
    """Tests for editing and deleting from the section."""

    @pytest.mark.asyncio
    async def test_edit_saves_body_and_closes_form(self, unit_env):
        session = await unit_env.get(LocalSession)
        session.sign_in(BOB)
        await seed(unit_env, 1)
        section = await CommentsSection.from_container(unit_env, ITEM_ID)
        await section.load()
        [node] = section.nodes()
        assert node.capabilities.can_edit
        section.start_edit(CommentId("c00"))

        comment = await section.edit(CommentId("c00"), "Reworded body")

        assert comment.body == "Reworded body"
        assert not section.ui_state.get(CommentId("c00")).edit_form_open
        [node] = section.nodes()
        assert node.display_body == "Reworded body"
        assert node.comment.is_edited

    @pytest.mark.asyncio
    async def test_failed_edit_keeps_form_open(self, unit_env):
        session = await unit_env.get(LocalSession)
        session.sign_in(ALICE)
        await seed(unit_env, 1)
        section = await CommentsSection.from_container(unit_env, ITEM_ID)
        await section.load()
        section.start_edit(CommentId("c00"))

        # Alice is not the author
        with pytest.raises(RemoteError):
            await section.edit(CommentId("c00"), "Not mine to change")

        assert section.ui_state.get(CommentId("c00")).edit_form_open
        assert section.nodes()[0].display_body == "A comment body"

    @pytest.mark.asyncio
    async def test_cancel_edit_closes_form(self, unit_env):
        await seed(unit_env, 1)
        section = await CommentsSection.from_container(unit_env, ITEM_ID)
        await section.load()
        section.start_edit(CommentId("c00"))

        section.cancel_edit(CommentId("c00"))

        assert not section.ui_state.get(CommentId("c00")).edit_form_open

    @pytest.mark.asyncio
    async def test_delete_leaves_tombstone_with_replies(self, unit_env):
        session = await unit_env.get(LocalSession)
        session.sign_in(BOB)
        source = await seed(unit_env, 1)
        source.add(make_comment("r1", parent_id="c00", author=ALICE, minutes=1))
        section = await CommentsSection.from_container(unit_env, ITEM_ID)
        await section.load()

        await section.delete(CommentId("c00"))

        [node] = section.nodes()
        assert node.comment.is_deleted
        assert node.display_body == REMOVED_PLACEHOLDER
        assert not node.capabilities.can_edit
        assert [child.id for child in node.children] == ["r1"]


class TestViewState:
    """Tests for node UI state and cache following."""

    @pytest.mark.asyncio
    async def test_collapse_unmounts_descendants(self, unit_env):
        source = await seed(unit_env, 1)
        source.add(make_comment("r1", parent_id="c00", author=BOB, minutes=1))
        source.add(make_comment("r2", parent_id="r1", author=BOB, minutes=2))
        section = await CommentsSection.from_container(unit_env, ITEM_ID)
        await section.load()
        section.ui_state.open_reply_form(CommentId("r1"))

        section.toggle_replies(CommentId("c00"))

        assert [n.id for n in section.visible_nodes()] == ["c00"]
        # r1 was unmounted and lost its state
        section.toggle_replies(CommentId("c00"))
        assert [n.id for n in section.visible_nodes()] == ["c00", "r1", "r2"]
        assert not section.ui_state.get(CommentId("r1")).reply_form_open

    @pytest.mark.asyncio
    async def test_ui_state_survives_refetch(self, unit_env):
        source = await seed(unit_env, 1)
        source.add(make_comment("r1", parent_id="c00", author=BOB, minutes=1))
        section = await CommentsSection.from_container(unit_env, ITEM_ID)
        await section.load()
        section.toggle_replies(CommentId("c00"))

        await section.refresh()

        assert not section.ui_state.is_expanded(CommentId("c00"))

    @pytest.mark.asyncio
    async def test_mounted_section_notices_invalidation(
        self, unit_env
    ):
        session = await unit_env.get(LocalSession)
        session.sign_in(ALICE)
        section = await CommentsSection.from_container(unit_env, ITEM_ID)
        await section.load()
        changes = []
        section.mount(on_change=lambda: changes.append(True))

        create_comment = await unit_env.get(CreateCommentUseCase)
        await create_comment.execute(
            CreateCommentRequest(content_item_id=ITEM_ID, body="From elsewhere")
        )

        assert section.needs_refresh
        assert changes
        page = await section.refresh_if_needed()
        assert page.total == 1
        assert not section.needs_refresh

        section.unmount()

    @pytest.mark.asyncio
    async def test_renders_capabilities_for_current_viewer(self, unit_env):
        session = await unit_env.get(LocalSession)
        await seed(unit_env, 1)
        section = await CommentsSection.from_container(unit_env, ITEM_ID)
        await section.load()

        [signed_out] = section.nodes()
        session.sign_in(ALICE)
        [signed_in] = section.nodes()

        assert not signed_out.capabilities.can_report
        assert signed_in.capabilities.can_report
