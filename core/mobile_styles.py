"""Mobile-friendly CSS styles for the console."""
import streamlit as st


def apply_mobile_styles():
    """Apply mobile-responsive CSS styles and the product card look."""
    st.markdown("""
    <style>
    /* Fix sidebar width */
    section[data-testid="stSidebar"] {
        width: 16rem !important;
        min-width: 16rem !important;
    }

    /* Status badges on the orders and sales pages */
    .status-badge {
        display: inline-block;
        padding: 2px 10px;
        border-radius: 999px;
        font-size: 12px;
        font-weight: 600;
    }
    .status-pending { background: #FEF9C3; color: #854D0E; }
    .status-processing { background: #DBEAFE; color: #1E40AF; }
    .status-completed { background: #DCFCE7; color: #166534; }
    .status-cancelled { background: #FEE2E2; color: #991B1B; }

    @media (max-width: 768px) {
        /* Larger touch targets for buttons */
        .stButton button {
            min-height: 48px !important;
            font-size: 16px !important;
        }

        .block-container {
            padding-left: 1rem !important;
            padding-right: 1rem !important;
        }

        /* Form inputs - prevent zoom on iOS */
        input, select, textarea {
            font-size: 16px !important;
        }
    }
    </style>
    """, unsafe_allow_html=True)
