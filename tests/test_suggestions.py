from portfolio_analyzer.analyzer.models import Issue, IssueCategory, IssueLevel, Priority, Suggestion
from portfolio_analyzer.analyzer.suggestions import SUGGESTION_TABLE, generate_suggestions


def issue(category, element="element-0"):
    return Issue(
        category=category,
        level=IssueLevel.WARNING,
        element=element,
        description="Something is off",
        suggestion="Fix it",
    )


def test_no_issues_no_suggestions():
    assert generate_suggestions([]) == []


def test_one_suggestion_per_category_in_table_order():
    issues = [
        issue(IssueCategory.UI),
        issue(IssueCategory.RESPONSIVE),
        issue(IssueCategory.PERFORMANCE),
        issue(IssueCategory.ACCESSIBILITY),
        issue(IssueCategory.ACCESSIBILITY, "element-1"),
    ]

    suggestions = generate_suggestions(issues)

    assert [s.category for s in suggestions] == [
        IssueCategory.ACCESSIBILITY,
        IssueCategory.PERFORMANCE,
        IssueCategory.RESPONSIVE,
        IssueCategory.UI,
    ]
    assert [s.priority for s in suggestions] == [
        Priority.HIGH, Priority.MEDIUM, Priority.MEDIUM, Priority.LOW,
    ]


def test_description_counts_issues():
    suggestions = generate_suggestions([
        issue(IssueCategory.ACCESSIBILITY, f"element-{i}") for i in range(3)
    ] + [issue(IssueCategory.PERFORMANCE)])

    assert suggestions[0].title == "Improve Accessibility"
    assert suggestions[0].description == "3 accessibility issues found"
    assert suggestions[1].title == "Optimize Animations"
    assert suggestions[1].description == "1 performance issue found"


def test_categories_without_issues_are_omitted():
    suggestions = generate_suggestions([issue(IssueCategory.RESPONSIVE)])

    assert len(suggestions) == 1
    assert suggestions[0].title == "Fix Responsive Issues"
    assert suggestions[0].actions == SUGGESTION_TABLE[IssueCategory.RESPONSIVE][2]


def test_generation_is_idempotent():
    issues = [issue(IssueCategory.UI), issue(IssueCategory.ACCESSIBILITY)]

    assert generate_suggestions(issues) == generate_suggestions(issues)


def test_every_category_has_a_table_entry():
    assert set(SUGGESTION_TABLE) == set(IssueCategory)


def test_suggestions_carry_example_css():
    (suggestion,) = generate_suggestions([issue(IssueCategory.PERFORMANCE)])

    assert "will-change: transform" in suggestion.code
    assert "translateZ(0)" in suggestion.code
    assert suggestion.to_dict()["code"] == suggestion.code


def test_code_is_omitted_from_dict_when_absent():
    suggestion = Suggestion(
        priority=Priority.LOW,
        category=IssueCategory.UI,
        title="Polish UI Details",
        description="1 ui issue found",
    )

    assert "code" not in suggestion.to_dict()
