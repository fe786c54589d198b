"""
活動報名頁面主應用程式
Guest Speaker Event Registration
"""
import logging
import streamlit as st

from src.ui.registration_page import render_registration_page
from src.utils.config import configure_logging, get_settings

logger = logging.getLogger(__name__)


# Streamlit 頁面配置
st.set_page_config(
    page_title="Guest Speaker Event",
    page_icon="🎤",
    layout="centered",
    initial_sidebar_state="collapsed"
)


def apply_custom_css():
    """套用自訂 CSS 樣式。"""
    st.markdown("""
        <style>
        /* 全域樣式 */
        .stApp {
            background: linear-gradient(135deg, #0f0c29 0%, #1a1a2e 50%, #16213e 100%);
        }

        /* 隱藏 Streamlit 預設元素 */
        #MainMenu {visibility: hidden;}
        footer {visibility: hidden;}

        /* 活動標頭 */
        .event-header {
            text-align: center;
            padding: 32px;
            margin-bottom: 24px;
            border-radius: 24px;
            border: 1px solid rgba(148, 163, 184, 0.3);
            background: rgba(15, 17, 40, 0.85);
            color: #f1f5f9;
        }

        .event-date {
            display: inline-block;
            padding: 6px 16px;
            border-radius: 999px;
            background: rgba(102, 126, 234, 0.15);
            border: 1px solid rgba(102, 126, 234, 0.4);
            color: #a5b4fc;
            font-weight: 600;
        }

        .event-description {
            color: #94a3b8;
        }

        /* 主要按鈕 */
        .stButton > button[kind="primary"], .stFormSubmitButton > button {
            border-radius: 12px;
            font-weight: 600;
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            color: white;
            border: none;
        }

        /* 輸入框樣式 */
        .stTextInput > div > div > input {
            background: #16213e;
            border: 1px solid #2d3748;
            border-radius: 8px;
            color: #f1f5f9;
        }
        </style>
    """, unsafe_allow_html=True)


def main():
    """主應用程式入口。"""
    settings = get_settings()
    configure_logging(settings.log_level)

    try:
        apply_custom_css()
        render_registration_page(settings)
    except Exception as e:
        logger.exception("Unhandled exception during app execution")
        st.error("應用程式發生錯誤，請重新整理頁面")
        st.code(str(e))


if __name__ == "__main__":
    main()
