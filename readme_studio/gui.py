import streamlit as st

# MUST be the first Streamlit command
st.set_page_config(layout="wide", page_title="README Studio", page_icon="📝")

import logging
from dataclasses import replace

import streamlit.components.v1 as components

from readme_studio import config
from readme_studio.autofill import MISSING_INPUT, fill_from_github
from readme_studio.badges import stats_urls, trophy_url
from readme_studio.cleaner import smart_split
from readme_studio.composer import compose
from readme_studio.exporter import README_FILENAME, README_MIME, preview_html, readme_bytes
from readme_studio.gallery import FILTERS, SAMPLE_PROFILE, filter_templates, get_template
from readme_studio.github_client import default_client
from readme_studio.profile import (
    PROJECT_FIELDS,
    SOCIAL_SERVICES,
    add_project,
    add_skill,
    remove_project,
    remove_skill,
    set_social,
    update_project,
)
from readme_studio.state import FetchGuard, StudioState
from readme_studio.themes import THEME_LABELS, THEMES

config.setup_logging()
log = logging.getLogger("readme_studio.gui")

_BASIC_KEYS = {"name": "name_input", "title": "title_input", "bio": "bio_input"}
_SOCIAL_KEYS = {s: f"{s}_input" for s in SOCIAL_SERVICES}
_TOGGLE_KEYS = {"show_stats": "show_stats_input", "show_badges": "show_badges_input"}


def _project_key(index: int, field_name: str) -> str:
    return f"project_{index}_{field_name}"


# --- Helpers to move records between state and widgets ---
def _profile():
    return st.session_state.studio.profile


def _set_profile(profile):
    st.session_state.studio = st.session_state.studio.with_profile(profile)


def _sync_widgets(profile):
    """Push a whole record into the form widgets (template load, GitHub fill)."""
    for field_name, key in _BASIC_KEYS.items():
        st.session_state[key] = getattr(profile, field_name)
    for service, key in _SOCIAL_KEYS.items():
        st.session_state[key] = getattr(profile.socials, service) or ""
    for field_name, key in _TOGGLE_KEYS.items():
        st.session_state[key] = getattr(profile, field_name)

    stale = [k for k in st.session_state if str(k).startswith("project_")]
    for key in stale:
        del st.session_state[key]
    for i, project in enumerate(profile.projects):
        for field_name in PROJECT_FIELDS:
            st.session_state[_project_key(i, field_name)] = getattr(project, field_name)


def _load_profile(profile, message: str):
    _set_profile(profile)
    _sync_widgets(profile)
    st.session_state.flash = ("success", message)
    log.info("Loaded profile for %r", profile.name)


# Initialize session state variables
if "studio" not in st.session_state:
    st.session_state.studio = StudioState().with_theme(config.DEFAULT_THEME)
    st.session_state.theme_input = st.session_state.studio.theme
    _sync_widgets(st.session_state.studio.profile)
if "fetch_guard" not in st.session_state:
    st.session_state.fetch_guard = FetchGuard()
# (level, message) shown once on the next run
if "flash" not in st.session_state:
    st.session_state.flash = None
if "skill_entry" not in st.session_state:
    st.session_state.skill_entry = ""


# --- Widget callbacks ---
def on_basic_change(field_name: str):
    _set_profile(replace(_profile(), **{field_name: st.session_state[_BASIC_KEYS[field_name]]}))


def on_social_change(service: str):
    _set_profile(set_social(_profile(), service, st.session_state[_SOCIAL_KEYS[service]]))


def on_toggle_change(field_name: str):
    _set_profile(replace(_profile(), **{field_name: st.session_state[_TOGGLE_KEYS[field_name]]}))


def on_theme_change():
    st.session_state.studio = st.session_state.studio.with_theme(st.session_state.theme_input)


def on_add_skills():
    profile = _profile()
    for skill in smart_split(st.session_state.skill_entry):
        profile = add_skill(profile, skill)
    _set_profile(profile)
    st.session_state.skill_entry = ""


def on_remove_skill(skill: str):
    _set_profile(remove_skill(_profile(), skill))


def on_add_project():
    profile = add_project(_profile())
    index = len(profile.projects) - 1
    for field_name in PROJECT_FIELDS:
        st.session_state[_project_key(index, field_name)] = ""
    _set_profile(profile)


def on_project_change(index: int, field_name: str):
    value = st.session_state[_project_key(index, field_name)]
    _set_profile(update_project(_profile(), index, field_name, value))


def on_remove_project(index: int):
    profile = remove_project(_profile(), index)
    _set_profile(profile)
    _sync_widgets(profile)


def on_use_template(template_id: str):
    _load_profile(get_template(template_id).profile, "Template loaded successfully!")


def on_fetch_github():
    guard = st.session_state.fetch_guard
    ticket = guard.begin()
    username = st.session_state[_SOCIAL_KEYS["github"]]
    with st.spinner("🔍 Fetching GitHub profile..."):
        outcome = fill_from_github(_profile(), username, default_client(), config.REPO_LIMIT)

    studio = guard.apply(st.session_state.studio, ticket, outcome)
    if studio is not st.session_state.studio:
        st.session_state.studio = studio
        _sync_widgets(studio.profile)

    if outcome.ok:
        st.session_state.flash = ("success", outcome.message)
    elif outcome.status == MISSING_INPUT:
        st.session_state.flash = ("warning", outcome.message)
    else:
        st.session_state.flash = ("error", outcome.message)


# Dark chrome around the app; the preview itself is themed separately
st.markdown("""
<style>
.stApp {
    background-color: #0D1117 !important;
    color: #ffffff !important;
}

div.stButton > button {
    background: #2F81F7 !important;
    color: white !important;
    border: none !important;
    border-radius: 12px !important;
    transition: all 0.3s ease !important;
}

div.stButton > button:hover {
    background: #58A6FF !important;
}

div.stButton > button[kind="secondary"] {
    background: transparent !important;
    border: 1px solid rgba(47, 129, 247, 0.4) !important;
}

div.stDownloadButton > button {
    background: linear-gradient(90deg, #10ac84 0%, #1dd1a1 100%) !important;
    color: white !important;
    border: none !important;
    border-radius: 12px !important;
    width: 100% !important;
}

div.stTextInput > div > div > input,
div.stTextArea textarea {
    background: #161B22 !important;
    border: 1px solid rgba(47, 129, 247, 0.2) !important;
    border-radius: 12px !important;
    color: white !important;
}

hr {
    border: none !important;
    height: 2px !important;
    background: linear-gradient(90deg, #2F81F7 0%, #58A6FF 100%) !important;
}

#MainMenu {visibility: hidden;}
footer {visibility: hidden;}

.dark-footer {
    text-align: center;
    padding: 2rem;
    color: #999;
    background: #161B22;
    border-radius: 8px;
    margin-top: 2rem;
    border: 1px solid rgba(47, 129, 247, 0.2);
}
</style>
""", unsafe_allow_html=True)

st.title("📝 README Studio")
st.markdown("Build a standout GitHub profile README with live preview")

if st.session_state.flash:
    level, message = st.session_state.flash
    st.session_state.flash = None
    if level == "success":
        st.toast(f"✅ {message}")
    elif level == "warning":
        st.warning(message)
    else:
        st.error(message)

st.radio(
    "Preview theme",
    options=list(THEMES),
    format_func=lambda t: THEME_LABELS.get(t, t),
    key="theme_input",
    horizontal=True,
    on_change=on_theme_change,
)

st.divider()

col_editor, col_preview = st.columns(2)

# --- Editor ---
with col_editor:
    head_left, head_right = st.columns([3, 1])
    with head_left:
        st.subheader("✏️ Editor")
    with head_right:
        st.button(
            "✨ Auto-Generate",
            type="secondary",
            on_click=_load_profile,
            args=(SAMPLE_PROFILE, "Auto-generated template loaded!"),
            use_container_width=True,
        )

    tab_basic, tab_skills, tab_projects = st.tabs(["Basic", "Skills", "Projects"])

    with tab_basic:
        st.text_input("Name", key="name_input", placeholder="Your Name",
                      on_change=on_basic_change, args=("name",))
        st.text_input("Title", key="title_input", placeholder="e.g., Full Stack Developer",
                      on_change=on_basic_change, args=("title",))
        st.text_area("Bio", key="bio_input", placeholder="Tell us about yourself...",
                     on_change=on_basic_change, args=("bio",))

        col_github, col_fetch = st.columns([4, 1], vertical_alignment="bottom")
        with col_github:
            st.text_input("GitHub Username", key="github_input", placeholder="username",
                          on_change=on_social_change, args=("github",))
        with col_fetch:
            st.button(
                "🐙 Fetch",
                on_click=on_fetch_github,
                disabled=not st.session_state.github_input,
                use_container_width=True,
            )
        st.caption('Click "Fetch" to auto-fill your profile from GitHub')

        st.text_input("LinkedIn", key="linkedin_input", placeholder="username",
                      on_change=on_social_change, args=("linkedin",))
        st.text_input("Twitter", key="twitter_input", placeholder="username",
                      on_change=on_social_change, args=("twitter",))
        st.text_input("Portfolio", key="portfolio_input", placeholder="https://...",
                      on_change=on_social_change, args=("portfolio",))

        st.toggle("Show GitHub Stats", key="show_stats_input",
                  on_change=on_toggle_change, args=("show_stats",))
        st.toggle("Show Badges", key="show_badges_input",
                  on_change=on_toggle_change, args=("show_badges",))

    with tab_skills:
        col_skill, col_add = st.columns([4, 1], vertical_alignment="bottom")
        with col_skill:
            st.text_input("Add Skills", key="skill_entry", placeholder="e.g., JavaScript, Rust")
        with col_add:
            st.button("➕", key="add_skill_btn", on_click=on_add_skills, use_container_width=True)

        skills = _profile().skills
        if skills:
            per_row = 4
            for start in range(0, len(skills), per_row):
                cols = st.columns(per_row)
                for col, skill in zip(cols, skills[start:start + per_row]):
                    with col:
                        st.button(f"✕ {skill}", key=f"remove_skill_{skill}", type="secondary",
                                  on_click=on_remove_skill, args=(skill,), use_container_width=True)
        else:
            st.caption("No skills yet. Separate several with commas.")

    with tab_projects:
        st.button("➕ Add Project", type="secondary", on_click=on_add_project, use_container_width=True)
        for i, _project in enumerate(_profile().projects):
            with st.container(border=True):
                label_col, remove_col = st.columns([5, 1])
                with label_col:
                    st.markdown(f"**Project {i + 1}**")
                with remove_col:
                    st.button("✕", key=f"remove_project_{i}", type="secondary",
                              on_click=on_remove_project, args=(i,))
                st.text_input("Project Name", key=_project_key(i, "name"),
                              placeholder="Project Name", label_visibility="collapsed",
                              on_change=on_project_change, args=(i, "name"))
                st.text_input("Description", key=_project_key(i, "description"),
                              placeholder="Description", label_visibility="collapsed",
                              on_change=on_project_change, args=(i, "description"))
                st.text_input("Link", key=_project_key(i, "link"),
                              placeholder="https://github.com/...", label_visibility="collapsed",
                              on_change=on_project_change, args=(i, "link"))

# --- Preview ---
studio = st.session_state.studio
markdown = compose(studio.profile)

with col_preview:
    head_left, head_right = st.columns([3, 1])
    with head_left:
        st.subheader("👀 Preview")
    with head_right:
        st.download_button(
            label="📥 Export",
            data=readme_bytes(markdown),
            file_name=README_FILENAME,
            mime=README_MIME,
            help="Download the README as a markdown file",
            disabled=not markdown,
            use_container_width=True,
        )

    components.html(preview_html(markdown, studio.theme), height=600, scrolling=True)

    with st.expander("📋 Copy markdown", expanded=False):
        st.code(markdown or "", language="markdown")

    github = studio.profile.socials.github
    if github:
        with st.expander("📈 Extra widgets", expanded=False):
            st.markdown("Stats cards styled to match the current preview theme:")
            urls = stats_urls(github, studio.theme)
            extras = "\n\n".join([
                f"![GitHub Streak]({urls['streak']})",
                f"![Trophies]({trophy_url(github, studio.theme)})",
            ])
            st.code(extras, language="markdown")

st.divider()

# --- Template gallery ---
st.subheader("🎨 Template Gallery")
selected_filter = st.radio("Filter", options=FILTERS, key="gallery_filter", horizontal=True)

templates = filter_templates(selected_filter)
for start in range(0, len(templates), 3):
    cols = st.columns(3)
    for col, template in zip(cols, templates[start:start + 3]):
        with col:
            with st.container(border=True):
                st.markdown(f"**{template.name}**")
                st.caption(" · ".join(template.tags))
                st.write(template.preview)
                st.button(
                    "Use Template",
                    key=f"use_template_{template.id}",
                    on_click=on_use_template,
                    args=(template.id,),
                    use_container_width=True,
                )

st.markdown("---")
st.markdown("""
<div class="dark-footer">
    <p style="margin: 0; font-size: 0.9rem;">
        <strong>📝 README Studio</strong> | Live preview, themes and GitHub auto-fill
    </p>
</div>
""", unsafe_allow_html=True)
