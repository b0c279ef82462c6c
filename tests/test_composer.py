from readme_studio.composer import compose
from readme_studio.gallery import SAMPLE_PROFILE, TEMPLATES
from readme_studio.profile import (
    Project,
    ProfileRecord,
    Socials,
    add_project,
    empty_profile,
    update_project,
)


def test_empty_profile_composes_to_empty_string():
    assert compose(ProfileRecord()) == ""
    # toggles alone produce nothing
    assert compose(empty_profile()) == ""


def test_compose_is_deterministic():
    for template in TEMPLATES:
        assert compose(template.profile) == compose(template.profile)
    assert compose(SAMPLE_PROFILE) == compose(SAMPLE_PROFILE)


def test_greeting_with_name_and_github():
    md = compose(ProfileRecord(name="Ada", socials=Socials(github="ada")))
    assert md.startswith("# Hi there! 👋 I'm Ada (@ada)\n\n")


def test_greeting_with_name_only():
    assert compose(ProfileRecord(name="Ada")) == "# Hi there! 👋 I'm Ada\n\n"


def test_greeting_with_github_only():
    md = compose(ProfileRecord(socials=Socials(github="ada")))
    assert md.startswith("# Hi there! 👋 I'm @ada\n\n")


def test_no_greeting_without_name_or_github():
    md = compose(ProfileRecord(title="Engineer", socials=Socials(linkedin="ada")))
    assert "Hi there" not in md
    assert md.startswith("## Engineer\n\n")


def test_title_and_bio_sections():
    md = compose(ProfileRecord(name="Ada", title="Engineer", bio="I like engines."))
    assert md == (
        "# Hi there! 👋 I'm Ada\n\n"
        "## Engineer\n\n"
        "I like engines.\n\n"
    )


def test_tech_stack_badges_are_space_joined_on_one_line():
    md = compose(ProfileRecord(skills=("Rust", "C++", "C#", "Node.js", "React Native")))
    lines = md.split("\n")
    assert lines[0] == "### 🛠️ Tech Stack"
    assert lines[1] == ""
    assert lines[2] == " ".join([
        "![Rust](https://img.shields.io/badge/-Rust-05122A?style=flat&logo=rust)",
        "![C++](https://img.shields.io/badge/-C%2B%2B-05122A?style=flat&logo=cplusplus)",
        "![C#](https://img.shields.io/badge/-C%23-05122A?style=flat&logo=c#)",
        "![Node.js](https://img.shields.io/badge/-Node.js-05122A?style=flat&logo=node.js)",
        "![React Native](https://img.shields.io/badge/-React%20Native-05122A?style=flat&logo=reactnative)",
    ])
    assert md.endswith("\n\n")


def test_projects_section_skips_nameless_projects():
    profile = ProfileRecord(projects=(
        Project("Engine", "Computes things", "https://github.com/ada/engine"),
        Project("", "orphan description", "https://example.com/orphan"),
        Project("Notes", "Unlinked", ""),
    ))
    md = compose(profile)
    assert md == (
        "### 🚀 Featured Projects\n\n"
        "- **[Engine](https://github.com/ada/engine)** - Computes things\n"
        "- **[Notes](#)** - Unlinked\n\n"
    )
    assert "orphan" not in md


def test_projects_heading_kept_when_every_project_is_nameless():
    profile = update_project(add_project(ProfileRecord()), 0, "description", "draft")
    assert compose(profile) == "### 🚀 Featured Projects\n\n\n"


def test_connect_section_order_and_urls():
    socials = Socials(
        portfolio="https://ada.dev",
        twitter="ada_t",
        linkedin="ada_l",
        github="ada",
    )
    md = compose(ProfileRecord(socials=socials))
    connect = md.split("### 🔗 Connect with me\n\n", 1)[1].split("\n")
    assert connect[:4] == [
        "[![GitHub](https://img.shields.io/badge/@ada-181717?style=for-the-badge&logo=github&logoColor=white)](https://github.com/ada)",
        "[![LinkedIn](https://img.shields.io/badge/@ada_l-0077B5?style=for-the-badge&logo=linkedin&logoColor=white)](https://linkedin.com/in/ada_l)",
        "[![Twitter](https://img.shields.io/badge/@ada_t-1DA1F2?style=for-the-badge&logo=twitter&logoColor=white)](https://twitter.com/ada_t)",
        "[![Portfolio](https://img.shields.io/badge/Portfolio-FF7139?style=for-the-badge&logo=firefox&logoColor=white)](https://ada.dev)",
    ]


def test_connect_section_omitted_without_socials():
    assert "Connect with me" not in compose(ProfileRecord(name="Ada"))


def test_stats_hidden_when_toggle_off():
    md = compose(ProfileRecord(name="Ada", socials=Socials(github="ada"), show_stats=False))
    assert "GitHub Stats" not in md
    assert "github-readme-stats" not in md


def test_stats_need_a_github_username():
    md = compose(ProfileRecord(name="Ada", show_stats=True))
    assert "github-readme-stats" not in md


def test_stats_section_is_last():
    md = compose(ProfileRecord(socials=Socials(github="ada"), show_stats=True))
    assert md.endswith(
        "### 📊 GitHub Stats\n\n"
        "![GitHub Stats](https://github-readme-stats.vercel.app/api?username=ada&show_icons=true&theme=radical)\n\n"
        "![Top Languages](https://github-readme-stats.vercel.app/api/top-langs/?username=ada&layout=compact&theme=radical)\n\n"
    )


def test_show_badges_does_not_change_output():
    on = ProfileRecord(name="Ada", skills=("Rust",), show_badges=True)
    off = ProfileRecord(name="Ada", skills=("Rust",), show_badges=False)
    assert compose(on) == compose(off)


def test_end_to_end_profile():
    profile = ProfileRecord(
        name="Ada",
        socials=Socials(github="ada"),
        skills=("Rust",),
        show_stats=True,
    )
    md = compose(profile)
    lines = md.split("\n")
    assert "# Hi there! 👋 I'm Ada (@ada)" in lines
    assert "### 🛠️ Tech Stack" in lines
    assert "![Rust](https://img.shields.io/badge/-Rust-05122A?style=flat&logo=rust)" in lines
    assert any(l.endswith("(https://github.com/ada)") and l.startswith("[![GitHub]") for l in lines)
    assert "username=ada" in md.split("### 📊 GitHub Stats", 1)[1]


def test_sections_separated_by_single_blank_line():
    md = compose(SAMPLE_PROFILE)
    assert "\n\n\n" not in md
    assert md.endswith("\n\n") and not md.endswith("\n\n\n")
