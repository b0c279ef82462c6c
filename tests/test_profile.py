import pytest

from readme_studio.profile import (
    Project,
    ProfileRecord,
    Socials,
    add_project,
    add_skill,
    empty_profile,
    profile_from_dict,
    remove_project,
    remove_skill,
    set_social,
    update_project,
)


def test_empty_profile_defaults():
    p = empty_profile()
    assert p.name == p.title == p.bio == ""
    assert p.skills == () and p.projects == ()
    assert not p.socials.has_any()
    assert p.show_stats and p.show_badges


def test_add_skill_keeps_order_and_rejects_duplicates():
    p = ProfileRecord()
    for s in ["Rust", "Go", "Rust", "  Go  ", "rust", ""]:
        p = add_skill(p, s)
    assert p.skills == ("Rust", "Go", "rust")


def test_add_skill_does_not_mutate_the_original():
    before = ProfileRecord(skills=("Rust",))
    after = add_skill(before, "Go")
    assert before.skills == ("Rust",)
    assert after.skills == ("Rust", "Go")


def test_remove_skill():
    p = ProfileRecord(skills=("Rust", "Go", "Zig"))
    assert remove_skill(p, "Go").skills == ("Rust", "Zig")
    assert remove_skill(p, "Haskell").skills == p.skills


def test_projects_add_update_remove_by_index():
    p = add_project(add_project(add_project(ProfileRecord())))
    p = update_project(p, 0, "name", "A")
    p = update_project(p, 1, "name", "B")
    p = update_project(p, 2, "name", "C")
    p = update_project(p, 1, "link", "https://b.dev")
    assert [x.name for x in p.projects] == ["A", "B", "C"]
    assert p.projects[1] == Project("B", "", "https://b.dev")

    p = remove_project(p, 1)
    assert [x.name for x in p.projects] == ["A", "C"]


def test_update_project_rejects_bad_field_and_index():
    p = add_project(ProfileRecord())
    with pytest.raises(ValueError):
        update_project(p, 0, "stars", "5")
    with pytest.raises(IndexError):
        update_project(p, 3, "name", "x")
    with pytest.raises(IndexError):
        remove_project(p, -1)


def test_set_social():
    p = set_social(ProfileRecord(), "github", "ada")
    assert p.socials.github == "ada"
    assert set_social(p, "github", "").socials.github is None
    with pytest.raises(ValueError):
        set_social(p, "myspace", "ada")


def test_profile_from_dict_reads_template_shape():
    data = {
        "name": "Ada",
        "title": "Engineer",
        "bio": "",
        "skills": ["Rust", "Go"],
        "socials": {"github": "ada", "portfolio": "https://ada.dev"},
        "projects": [{"name": "Engine", "description": "", "link": ""}],
        "showStats": True,
        "showBadges": False,
    }
    p = profile_from_dict(data)
    assert p.socials == Socials(github="ada", portfolio="https://ada.dev")
    assert p.skills == ("Rust", "Go")
    assert p.projects == (Project("Engine", "", ""),)
    assert p.show_stats is True and p.show_badges is False


def test_profile_from_dict_drops_duplicate_skills_and_fills_defaults():
    p = profile_from_dict({"skills": ["Go", "Go", "Rust"]})
    assert p.skills == ("Go", "Rust")
    assert p.name == "" and p.projects == ()
    assert p.show_stats is False
