import streamlit as st
import logging

from loan_emi import config
from loan_emi.calculator import evaluate
from loan_emi.presenter import EmiPresenter
from loan_emi.sync import InputSync, LoanField

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# ============ PAGE CONFIG ============
st.set_page_config(
    page_title="EMI Calculator - Plan Your Loan",
    page_icon="💰",
    layout="wide",
    initial_sidebar_state="collapsed"
)

# ============ CUSTOM CSS ============
st.markdown("""
<style>
    .header-box {
        background: linear-gradient(135deg, #1a1a1a 0%, #333333 100%);
        padding: 40px 30px;
        border-radius: 20px;
        color: #E5E5E5;
        text-align: center;
        margin-bottom: 30px;
        border: 1px solid #D4AF37;
        box-shadow: 0 15px 40px rgba(212, 175, 55, 0.15);
    }

    .header-box h1 { font-size: 2.8em; font-weight: 800; margin: 0; color: #D4AF37; }
    .header-box p { font-size: 1.15em; opacity: 0.9; margin: 8px 0 0 0; }

    div[data-testid="stMetricValue"] { color: #D4AF37; }
</style>
""", unsafe_allow_html=True)

# ============ INPUTS ============
FIELDS = [
    LoanField("loan_amount", "Loan Amount (₹)", *config.LOAN_AMOUNT),
    LoanField("interest_rate", "Interest Rate (% p.a.)", *config.INTEREST_RATE),
    LoanField("loan_tenure", "Loan Tenure (Years)", *config.LOAN_TENURE),
]

# ============ SESSION STATE ============
if "presenter" not in st.session_state:
    st.session_state.presenter = EmiPresenter()


def recompute(values):
    outcome = evaluate(values["loan_amount"], values["interest_rate"], values["loan_tenure"])
    st.session_state.presenter.apply(outcome)


sync = InputSync(st.session_state, FIELDS, recompute)

if "seeded" not in st.session_state:
    sync.seed()
    st.session_state.seeded = True

# ============ UI ============
st.markdown("""
<div class="header-box">
    <h1>💰 EMI Calculator</h1>
    <p>Know your monthly installment before you borrow</p>
</div>
""", unsafe_allow_html=True)

with st.sidebar:
    st.markdown("### 📚 How it works")
    st.info("""
    EMI = P × r × (1 + r)ⁿ / ((1 + r)ⁿ − 1)

    - P: loan amount
    - r: annual rate ÷ 12 ÷ 100
    - n: tenure in months
    """)

col_inputs, col_results = st.columns([3, 2], gap="large")

with col_inputs:
    st.markdown("### 🧮 Loan Details")
    for f in FIELDS:
        st.number_input(
            f.label,
            min_value=0.0,
            step=f.step,
            key=f.field_key,
            on_change=sync.from_field,
            args=(f.name,),
        )
        st.slider(
            f.label,
            min_value=f.minimum,
            max_value=f.maximum,
            step=f.step,
            key=f.slider_key,
            on_change=sync.from_slider,
            args=(f.name,),
            label_visibility="collapsed",
        )

presenter = st.session_state.presenter

with col_results:
    st.markdown("### 📊 Your EMI")

    if presenter.last_error:
        st.warning(f"⚠️ {presenter.last_error}. Showing the last valid result.")

    summary = presenter.summary
    if summary:
        st.metric("Monthly EMI", summary.monthly_installment)
        m1, m2, m3 = st.columns(3)
        m1.metric("Principal Amount", summary.principal)
        m2.metric("Total Interest", summary.total_interest)
        m3.metric("Total Payment", summary.total_payment)

    if presenter.chart.figure is not None:
        st.plotly_chart(presenter.chart.figure, key="emi_chart")

st.divider()
st.caption("💰 EMI Calculator | Built with Streamlit & Plotly")
