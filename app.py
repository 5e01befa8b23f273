import html

import streamlit as st

# Must be first Streamlit call
st.set_page_config(page_title="Use-Case Scorecard", layout="wide")

# ----------------------------
# Imports (engine)
# ----------------------------
from scorecard.analytics import compute_metrics, portfolio_frame
from scorecard.classifier import Tier
from scorecard.config import ENGINE_VERSION
from scorecard.criteria import CRITERIA
from scorecard.explain import explain_score
from scorecard.portfolio import Portfolio
from scorecard.positioning import quadrant
from scorecard.scoring import round2
from scorecard.session import EditingSession

# ----------------------------
# Session state
# ----------------------------
# Each browser session owns its own editing session and portfolio.
if "session" not in st.session_state:
    st.session_state.session = EditingSession()
if "portfolio" not in st.session_state:
    st.session_state.portfolio = Portfolio()
if "last_saved" not in st.session_state:
    st.session_state.last_saved = None

session: EditingSession = st.session_state.session
portfolio: Portfolio = st.session_state.portfolio


def push_session_to_widgets():
    st.session_state["uc_title"] = session.title
    st.session_state["uc_owner"] = session.owner
    st.session_state["uc_tags"] = session.tags_text
    for c in CRITERIA:
        st.session_state[f"rating_{c.key}"] = float(session.ratings.get(c.key, 0.0))
        st.session_state[f"weight_{c.key}"] = float(session.weights.get(c.key, 0.0))
    st.session_state["th_immediate"] = float(session.thresholds.immediate)
    st.session_state["th_strong"] = float(session.thresholds.strong)


# Ensure widget keys exist BEFORE widgets render
if "uc_title" not in st.session_state:
    push_session_to_widgets()

# ----------------------------
# UI styling
# ----------------------------
st.markdown(
    """
<style>
.block-container { padding-top: 1.1rem; padding-bottom: 2rem; }
h1, h2, h3 { letter-spacing: -0.02em; }
small, .stCaption { color: rgba(0,0,0,0.62) !important; }

.item-card {
  padding: 0.9rem 1rem;
  border-radius: 14px;
  border: 1px solid rgba(0,0,0,0.08);
  background: rgba(255,255,255,0.75);
  margin-bottom: 0.4rem;
}
.item-title { font-weight: 700; font-size: 1.05rem; }
.item-meta { color: rgba(0,0,0,0.65); font-size: 0.85rem; }
</style>
""",
    unsafe_allow_html=True,
)

# Display attributes for tiers belong here, not in the engine.
TIER_TONES = {
    Tier.QUICK_WIN: "info",
    Tier.STRATEGIC_BET: "good",
    Tier.FILL_IN: "neutral",
}


# ----------------------------
# Helpers
# ----------------------------
def badge_html(text: str, tone: str = "neutral") -> str:
    tones = {
        "neutral": ("#111827", "#E5E7EB"),
        "good": ("#065F46", "#D1FAE5"),
        "warn": ("#92400E", "#FEF3C7"),
        "info": ("#1E3A8A", "#DBEAFE"),
    }
    fg, bg = tones.get(tone, tones["neutral"])
    return f"""<span style="
        display:inline-block;
        padding:0.25rem 0.55rem;
        border-radius:999px;
        font-size:0.80rem;
        font-weight:600;
        color:{fg};
        background:{bg};
        border:1px solid rgba(0,0,0,0.06);
    ">{html.escape(str(text))}</span>"""


def badge(text: str, tone: str = "neutral"):
    st.markdown(badge_html(text, tone), unsafe_allow_html=True)


def section_title(title: str, subtitle: str = ""):
    st.markdown(f"### {title}")
    if subtitle:
        st.caption(subtitle)


def on_reset():
    session.reset()
    push_session_to_widgets()


def on_save():
    record = session.save_to(portfolio)
    st.session_state.last_saved = record.title


def on_remove(record_id: str):
    portfolio.remove(record_id)


# ----------------------------
# Views
# ----------------------------
def view_score():
    section_title("Use Case Information")
    c1, c2, c3 = st.columns(3)
    with c1:
        st.text_input("Use Case Title", key="uc_title", placeholder="e.g., AI-Powered Customer Churn Prediction")
    with c2:
        st.text_input("Owner / Team", key="uc_owner", placeholder="e.g., Data Science Team")
    with c3:
        st.text_input("Tags", key="uc_tags", placeholder="e.g., NLP, Customer Analytics")

    session.title = st.session_state["uc_title"]
    session.owner = st.session_state["uc_owner"]
    session.tags_text = st.session_state["uc_tags"]

    section_title("Evaluation Criteria (0-10 scale)", "Based on the GSAIF framework.")
    for c in CRITERIA:
        st.slider(
            c.label,
            min_value=0.0,
            max_value=10.0,
            step=1.0,
            key=f"rating_{c.key}",
            help=f"{c.help} (default weight {round(c.weight * 100)}%)",
        )
        session.set_rating(c.key, st.session_state[f"rating_{c.key}"])
    st.caption("Implementation Effort counts against the score: higher effort lowers the total.")


def view_weights():
    section_title("Criterion Weights", "Adjust the relative importance of each criterion. All weights should sum to 1.0.")

    cols = st.columns(2)
    for i, c in enumerate(CRITERIA):
        with cols[i % 2]:
            st.number_input(
                c.label,
                min_value=0.0,
                max_value=1.0,
                step=0.01,
                key=f"weight_{c.key}",
                help=c.help,
            )
            session.set_weight(c.key, st.session_state[f"weight_{c.key}"])

    total = round2(session.weight_sum)
    if session.is_weight_valid:
        st.success(f"Total: {total} ✓")
    else:
        st.warning(f"Total: {total} (should equal 1.0). Scores are still computed with these weights.")

    section_title("Classification Thresholds")
    t1, t2 = st.columns(2)
    with t1:
        st.number_input("Quick Win (Immediate) ≥", min_value=0.0, max_value=10.0, step=0.1, key="th_immediate")
    with t2:
        st.number_input("Strategic Bet ≥", min_value=0.0, max_value=10.0, step=0.1, key="th_strong")
    session.set_thresholds(
        immediate=st.session_state["th_immediate"],
        strong=st.session_state["th_strong"],
    )
    if not session.thresholds.is_ordered:
        st.warning("The Quick Win threshold is not above the Strategic Bet threshold: Strategic Bet cannot be reached.")


def view_results():
    import pandas as pd

    total = session.total
    label = session.label
    point = session.position

    c1, c2 = st.columns([2, 1])
    with c1:
        section_title("Impact-Effort Matrix", "Split at 5 / 5. Effort is the raw rating.")
        points = [{"name": session.title, "impact": point.impact, "effort": point.effort}]
        for r in portfolio:
            points.append({"name": r.title, "impact": r.impact, "effort": r.effort})
        st.scatter_chart(pd.DataFrame(points), x="impact", y="effort")
        st.caption(f"Current use case sits in: **{quadrant(point).value}**")

    with c2:
        section_title("Evaluation Summary")
        st.metric("Weighted Score", f"{total} / 10")
        st.markdown("**Classification**")
        badge(label.tier.value, TIER_TONES.get(label.tier, "neutral"))
        st.caption(f"Priority: {label.priority.value}")
        st.metric("Impact", f"{point.impact} / 10")
        st.metric("Effort", f"{point.effort} / 10")
        st.caption("Impact = avg(Business Value, Strategic Alignment)")

    st.subheader("Explainability")
    explanation = explain_score(session.ratings, session.weights)
    e1, e2 = st.columns(2)
    with e1:
        st.markdown("**Lowest rated**")
        for item in explanation.get("lowest_criteria", []):
            st.write(f"- {item.get('label')}: {item.get('rating')}")
        st.markdown("**Weakest contributors (weighted)**")
        for item in explanation.get("top_negative_contributors", []):
            st.write(f"- {item.get('label')}: {item.get('weighted')}")
    with e2:
        st.markdown("**Highest rated**")
        for item in explanation.get("highest_criteria", []):
            st.write(f"- {item.get('label')}: {item.get('rating')}")
        st.markdown("**Strongest contributors (weighted)**")
        for item in explanation.get("top_positive_contributors", []):
            st.write(f"- {item.get('label')}: {item.get('weighted')}")


def render_item(r):
    tone = TIER_TONES.get(r.label.tier, "neutral")
    tags = " ".join(badge_html(t) for t in r.tags)
    st.markdown(
        f"""
<div class="item-card">
  <div class="item-title">{html.escape(r.title)} {badge_html(r.label.tier.value, tone)}</div>
  <div class="item-meta">Owner: <b>{html.escape(r.owner or "Unassigned")}</b> • Score: <b>{r.total}</b> • Impact: {r.impact} • Effort: {r.effort}</div>
  <div>{tags}</div>
  <div class="item-meta">Saved {r.created_at}</div>
</div>
""",
        unsafe_allow_html=True,
    )
    st.button("Remove", key=f"rm_{r.id}", on_click=on_remove, args=(r.id,))


def view_portfolio():
    n = len(portfolio)
    section_title("Portfolio Overview", f"{n} use case{'s' if n != 1 else ''} saved")

    query = st.text_input("Search", key="search", placeholder="Search by title, owner, or tags...")
    filtered = portfolio.filter(query)

    if not filtered:
        st.info("No use cases saved yet. Start by scoring a use case!" if n == 0 else "No results found.")
        return

    metrics = compute_metrics(filtered)
    m1, m2, m3 = st.columns(3)
    m1.metric("Use cases", metrics.get("total", 0))
    m2.metric("Avg score", metrics.get("avg_score") if metrics.get("avg_score") is not None else "—")
    m3.metric("Quick Wins", metrics.get("tiers", {}).get(Tier.QUICK_WIN.value, 0))

    with st.expander("Table view"):
        st.dataframe(portfolio_frame(filtered), use_container_width=True)

    for r in filtered:
        render_item(r)


# ----------------------------
# Main app shell
# ----------------------------
h1, h2 = st.columns([3, 1])
with h1:
    st.title("AI Incubator Scorecard")
    st.caption("GSAIF Framework • Use Case Prioritization")
with h2:
    b1, b2 = st.columns(2)
    with b1:
        st.button("Reset", key="btn_reset", on_click=on_reset, use_container_width=True)
    with b2:
        st.button("Save to Portfolio", key="btn_save", on_click=on_save, type="primary", use_container_width=True)

if st.session_state.last_saved:
    st.toast(f"Saved '{st.session_state.last_saved}' to the portfolio")
    st.session_state.last_saved = None

tabs = st.tabs(["Score Use Case", "Configure Weights", "Results & Matrix", "Portfolio View"])
with tabs[0]:
    view_score()
with tabs[1]:
    view_weights()
with tabs[2]:
    view_results()
with tabs[3]:
    view_portfolio()

st.caption(f"Scorecard engine v{ENGINE_VERSION}")
