"""
ReactPrep - React Interview Question Bank

Streamlit application for practising React hooks, performance and
design-pattern pitfalls through annotated code comparisons.

Progress is stored server-side in a SQLite file. With authentication
configured, each signed-in user gets their own progress key. Without it,
all sessions share one progress record, which suits a single local user.

Usage:
    streamlit run app.py
"""

import logging
from typing import Optional

import streamlit as st

from reactprep.config import LOG_FORMAT, LOG_LEVEL
from reactprep.errors import TopicNotFoundError
from reactprep.questionbank import (
    ALL_DIFFICULTIES,
    SAVED_PATH,
    TOPICS_PATH,
    QuestionBankLoader,
    QuestionBankNavigator,
    filter_questions,
    open_progress_store,
    topic_path,
)
from reactprep.schemas import Difficulty, HighlightedQuestion, Topic
from reactprep.utils import get_theme_css, highlight_questions
from reactprep.viewer import (
    PROBLEM_TAB,
    SOLUTION_TAB,
    get_code_css,
    get_question_css,
    get_topics_css,
    render_breadcrumbs,
    render_empty_question_list,
    render_question_card,
    render_question_list_header,
    render_sidebar_content,
    render_sidebar_nav,
    render_topic_grid,
    resolve_theme,
)

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Configuration
# -----------------------------------------------------------------------------

st.set_page_config(
    page_title="ReactPrep",
    page_icon="⚛️",
    layout="wide",
    initial_sidebar_state="expanded",
)

DIFFICULTY_FILTERS = [ALL_DIFFICULTIES] + [d.value for d in Difficulty]


@st.cache_resource
def get_loader() -> QuestionBankLoader:
    """Catalog shared by all sessions."""
    return QuestionBankLoader()


@st.cache_resource
def get_highlighted_questions(topic_id: str) -> list[HighlightedQuestion]:
    """Pre-highlighted questions for a topic, rendered once per process."""
    return highlight_questions(get_loader().get_questions_for_topic(topic_id))


# -----------------------------------------------------------------------------
# Session State Initialization
# -----------------------------------------------------------------------------

def init_session_state():
    """Initialize session state variables."""
    if "progress" not in st.session_state:
        # Starts unloaded; hydrate_progress() loads it after the first render.
        st.session_state.progress = open_progress_store(user_id=current_user_id())

    if "navigator" not in st.session_state:
        st.session_state.navigator = QuestionBankNavigator(get_loader(), st.session_state.progress)


def current_user_id() -> Optional[str]:
    """Signed-in user's email, or None when the app has no authentication."""
    return st.user.get("email")


def current_theme() -> str:
    """Code theme matching the configured Streamlit theme."""
    return resolve_theme(st.get_option("theme.base"))


def hydrate_progress():
    """Load persisted progress once, then rerun so the page shows it."""
    progress = st.session_state.progress
    if not progress.is_ready:
        progress.load()
        logger.info(f"Loaded progress: {len(progress.completed_ids)} completed, {len(progress.saved_ids)} saved")
        st.rerun()


def current_path() -> str:
    """App path derived from query parameters."""
    if st.query_params.get("view") == "saved":
        return SAVED_PATH
    slug = st.query_params.get("topic")
    if slug:
        return topic_path(slug)
    return TOPICS_PATH


# -----------------------------------------------------------------------------
# Sidebar
# -----------------------------------------------------------------------------

def render_sidebar():
    """Render the sidebar with navigation and progress."""
    nav = st.session_state.navigator

    st.sidebar.title("⚛️ ReactPrep")
    st.sidebar.markdown(get_topics_css(), unsafe_allow_html=True)
    st.sidebar.markdown(render_sidebar_nav(nav.get_sidebar_items(current_path())), unsafe_allow_html=True)

    st.sidebar.divider()

    stats = nav.get_progress_summary()
    st.sidebar.markdown(
        f"**Progress:** {stats['completed']}/{stats['total_questions']} questions "
        f"({stats['completion_percent']}%)"
    )
    st.sidebar.progress(stats['completion_percent'] / 100)
    for topic_stats in stats["topics"]:
        st.sidebar.caption(f"{topic_stats['name']}: {topic_stats['completed']}/{topic_stats['total']}")
    st.sidebar.caption(f"Saved: {stats['saved']}")

    if st.session_state.progress.is_ready and stats["completed"] + stats["saved"] > 0:
        with st.sidebar.expander("Reset progress"):
            st.button("Clear completed and saved", on_click=st.session_state.progress.reset)


# -----------------------------------------------------------------------------
# Question Cards
# -----------------------------------------------------------------------------

def render_question(question: HighlightedQuestion):
    """Render one question card with its controls."""
    progress = st.session_state.progress
    completed = progress.is_completed(question.id)
    saved = progress.is_saved(question.id)

    with st.container():
        col1, col2, col3 = st.columns([6, 2, 2])
        with col1:
            tab_label = st.radio(
                "Code",
                ["Problem", "Solution"],
                key=f"tab_{question.id}",
                horizontal=True,
                label_visibility="collapsed",
            )
        with col2:
            st.button(
                "🔖 Saved" if saved else "🔖 Save",
                key=f"save_{question.id}",
                on_click=progress.toggle_saved,
                args=(question.id,),
                use_container_width=True,
            )
        with col3:
            st.button(
                "✅ Completed" if completed else "Mark Done",
                key=f"done_{question.id}",
                on_click=progress.toggle_completed,
                args=(question.id,),
                type="secondary" if completed else "primary",
                use_container_width=True,
            )

        active_tab = SOLUTION_TAB if tab_label == "Solution" else PROBLEM_TAB
        show_mistakes = False
        if active_tab == PROBLEM_TAB and question.mistakes:
            show_mistakes = st.toggle("Reveal Mistakes", key=f"mistakes_{question.id}")

        st.markdown(
            render_question_card(
                question,
                active_tab=active_tab,
                show_mistakes=show_mistakes,
                completed=completed,
                saved=saved,
                show_hints=False,
                theme=current_theme(),
            ),
            unsafe_allow_html=True,
        )

        if question.hints:
            with st.expander("Show hints"):
                st.markdown(render_sidebar_content("hints", question.hints), unsafe_allow_html=True)


def render_page_css():
    st.markdown(get_theme_css(), unsafe_allow_html=True)
    st.markdown(get_code_css(), unsafe_allow_html=True)
    st.markdown(get_question_css(), unsafe_allow_html=True)
    st.markdown(get_topics_css(), unsafe_allow_html=True)


# -----------------------------------------------------------------------------
# Topics View
# -----------------------------------------------------------------------------

def render_topics_view():
    """Render the topic grid."""
    nav = st.session_state.navigator

    st.title("Master React Interviews")
    st.markdown(
        "Browse specialized topics, discover common pitfalls, and level up your "
        "engineering skills with interactive code snippets."
    )
    st.markdown(
        render_topic_grid(nav.loader.get_topics(), nav.get_topic_progress_map()),
        unsafe_allow_html=True,
    )


# -----------------------------------------------------------------------------
# Topic View
# -----------------------------------------------------------------------------

def render_topic_view(slug: str):
    """Render one topic's question list, or a not-found page."""
    nav = st.session_state.navigator

    try:
        topic = nav.loader.get_topic_by_slug(slug)
    except TopicNotFoundError as e:
        logger.info(str(e))
        render_not_found(slug)
        return

    st.markdown(render_breadcrumbs(nav.get_breadcrumbs(topic_path(topic.slug))), unsafe_allow_html=True)
    st.title(topic.name)
    st.markdown(topic.description)
    st.progress(nav.get_topic_progress(topic.id) / 100)

    render_question_list(topic)


def render_question_list(topic: Topic):
    """Render the difficulty filter and filtered cards."""
    nav = st.session_state.navigator
    counts = nav.count_by_difficulty(topic.id)

    difficulty = st.radio(
        "Difficulty",
        DIFFICULTY_FILTERS,
        key=f"filter_{topic.id}",
        horizontal=True,
        format_func=lambda d: f"{d.title()} ({counts.get(d, 0)})",
    )
    questions = filter_questions(get_highlighted_questions(topic.id), difficulty)

    st.markdown(render_question_list_header(len(questions)), unsafe_allow_html=True)
    if not questions:
        st.markdown(render_empty_question_list(), unsafe_allow_html=True)
        return

    for question in questions:
        render_question(question)


def render_not_found(slug: str):
    st.markdown(render_breadcrumbs(st.session_state.navigator.get_breadcrumbs(TOPICS_PATH)), unsafe_allow_html=True)
    st.error(f"Topic not found: {slug}")
    st.markdown("[← Back to All Topics](?)")


# -----------------------------------------------------------------------------
# Saved View
# -----------------------------------------------------------------------------

def render_saved_view():
    """Render questions the user has saved."""
    nav = st.session_state.navigator

    st.markdown(render_breadcrumbs(nav.get_breadcrumbs(SAVED_PATH)), unsafe_allow_html=True)
    st.title("Saved Questions")

    saved_ids = {q.id for q in nav.get_saved_questions()}
    if not saved_ids:
        st.info("Bookmark questions to collect them here.")
        return

    for topic in nav.loader.get_topics():
        questions = [q for q in get_highlighted_questions(topic.id) if q.id in saved_ids]
        if questions:
            st.subheader(topic.name)
            for question in questions:
                render_question(question)


# -----------------------------------------------------------------------------
# Main App
# -----------------------------------------------------------------------------

def main():
    """Main application entry point."""
    init_session_state()
    render_page_css()
    render_sidebar()

    path = current_path()
    if path == SAVED_PATH:
        render_saved_view()
    elif path == TOPICS_PATH:
        render_topics_view()
    else:
        render_topic_view(st.query_params["topic"])

    hydrate_progress()


if __name__ == "__main__":
    main()
