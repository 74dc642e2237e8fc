import streamlit as st
import requests

from spellcheck.config import API_BASE

st.set_page_config(page_title='Spell Check Demo', layout='centered')
st.title('🔤 Spell Check Demo')

# ---------- Sidebar ----------
with st.sidebar:
    st.header('About')
    st.markdown(
        "Suggestions cover two kinds of typos: a letter typed too many or too few "
        "times (`ballloooon`), and a missing vowel (`blloon`)."
    )
    st.caption(f"Backend: {API_BASE}")


# ---------- Main ----------
word = st.text_input('Enter a word (e.g., "ballloooon")')
if st.button('Check') and word.strip():
    try:
        resp = requests.get(f"{API_BASE}/spelling/{requests.utils.quote(word.strip(), safe='')}", timeout=15)
        if resp.ok:
            data = resp.json()
            if data.get("correct"):
                st.success(f"**{data['word']}** is spelled correctly")
            else:
                suggestions = data.get("suggestions", [])
                if suggestions:
                    st.warning(f"**{data['word']}** looks misspelled. Did you mean:")
                    for s in suggestions:
                        st.markdown(f"- {s}")
                else:
                    st.error(f"**{data['word']}** looks misspelled and no suggestions were found")
        else:
            detail = resp.json().get("detail", resp.text) if resp.headers.get("content-type", "").startswith("application/json") else resp.text
            st.error(f"Backend error: {resp.status_code} {detail}")
    except Exception as e:
        st.error(f'Error connecting to backend: {e}')
