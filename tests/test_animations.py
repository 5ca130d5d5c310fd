from portfolio_analyzer.analyzer.animations import (
    audit_animations,
    has_animation,
    has_transition,
    is_accelerated,
    is_animated,
)
from portfolio_analyzer.analyzer.models import IssueCategory, IssueLevel

from conftest import make_probe


def test_inert_element_is_not_animated():
    probe = make_probe(transform="none", transition="all 0s ease 0s", animation_name="none")

    assert not is_animated(probe)
    assert audit_animations([probe]) == []


def test_zero_duration_transition_does_not_count():
    assert not has_transition(make_probe(transition="opacity 0s linear 0s"))
    assert has_transition(make_probe(transition="opacity 0.3s ease 0s"))
    assert has_transition(make_probe(transition="opacity 0s ease 150ms"))


def test_animation_shorthand_fallback():
    assert has_animation(make_probe(animation="float 6s ease-in-out infinite"))
    assert not has_animation(make_probe(animation="none"))
    assert not has_animation(make_probe())


def test_2d_transform_without_hint_is_flagged():
    probe = make_probe("shape-circle-0", transform="matrix(1, 0, 0, 1, 10, 0)", will_change="auto")

    (issue,) = audit_animations([probe])

    assert issue.category is IssueCategory.PERFORMANCE
    assert issue.level is IssueLevel.WARNING
    assert issue.element == "shape-circle-0"
    assert issue.description == "Animation may not be hardware accelerated"
    assert issue.details["transform"] == "matrix(1, 0, 0, 1, 10, 0)"


def test_will_change_counts_as_accelerated():
    probe = make_probe(transition="transform 0.3s ease", will_change="transform")

    assert is_accelerated(probe)
    assert audit_animations([probe]) == []


def test_3d_transform_counts_as_accelerated():
    probe = make_probe(transform="matrix3d(1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1)")

    assert is_accelerated(probe)
    assert audit_animations([probe]) == []


def test_running_keyframe_animation_is_flagged():
    probe = make_probe("particle-3", animation_name="drift", will_change="auto")

    assert [issue.element for issue in audit_animations([probe])] == ["particle-3"]


def test_inline_translate_z_counts_as_accelerated():
    # Resolved style reports translateZ(0) as the identity 2-D matrix
    probe = make_probe(
        "social-link-0",
        transform="matrix(1, 0, 0, 1, 0, 0)",
        inline_transform="translateZ(0)",
        will_change="auto",
    )

    assert is_accelerated(probe)
    assert audit_animations([probe]) == []


def test_stylesheet_translate_z_is_indistinguishable_from_2d():
    probe = make_probe("social-link-0", transform="matrix(1, 0, 0, 1, 0, 0)", inline_transform="")

    assert not is_accelerated(probe)
