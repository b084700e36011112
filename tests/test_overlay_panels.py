from src.core.facilities import facility_modal
from src.core.overlays import OverlayManager
from src.core.roadmap_engine import phase_modal
from src.data.facilities import INFRASTRUCTURE_MARKERS
from src.data.roadmap import ROADMAP_PHASES
from src.ui.overlay_panels import open_modal_dialog, reset_stale_modal


def test_open_modal_dialog_shows_only_the_new_modal():
    manager = OverlayManager("roadmap")
    manager.open_modal(phase_modal(ROADMAP_PHASES[0]))
    shown = []

    open_modal_dialog(
        manager,
        phase_modal(ROADMAP_PHASES[3]),
        lambda m: shown.append(m.modal.title),
    )

    assert shown == [ROADMAP_PHASES[3].name]
    modals = [o for o in manager.open_overlays() if o.kind == "modal"]
    assert [o.title for o in modals] == [ROADMAP_PHASES[3].name]


def test_dismissed_dialog_is_forgotten_on_next_run():
    manager = OverlayManager("infrastructure_map")
    open_modal_dialog(manager, facility_modal(INFRASTRUCTURE_MARKERS[0]), lambda m: None)

    # Next rerun: the dialog was closed with its X button, no callback fired
    reset_stale_modal(manager)

    assert manager.modal is None
    assert manager.open_overlays() == []
