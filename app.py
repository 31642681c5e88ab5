import logging

import streamlit as st

from correction_flow import candidates_for, correct_text
from settings import settings
from spell_checker import SpellChecker, format_report, tokenize
from word_sources import dictionary_from_text, load_nltk_words, load_word_list

logging.basicConfig(level=settings.log_level)

st.set_page_config(page_title="Levenshtein Spell Checker", page_icon="📝")

# One checker per browser session; its cache lives as long as the session.
if "checker" not in st.session_state:
    dictionary = load_word_list(settings.dictionary_path) if settings.dictionary_path else None
    st.session_state.checker = SpellChecker(dictionary)
sc: SpellChecker = st.session_state.checker

# Sidebar: dictionary and cache management
st.sidebar.header("Dictionary")
source = st.sidebar.radio("Load from", ["Upload word list", "File path", "NLTK words corpus"])
if source == "Upload word list":
    upload = st.sidebar.file_uploader("Word list (whitespace separated)", type=["txt"])
    if upload is not None and st.sidebar.button("Load dictionary"):
        sc.load_dictionary(dictionary_from_text(upload.getvalue().decode("utf-8", errors="ignore")))
elif source == "File path":
    path = st.sidebar.text_input("Dictionary file", settings.dictionary_path or "")
    if path and st.sidebar.button("Load dictionary"):
        sc.load_dictionary(load_word_list(path))
        if not len(sc.dictionary):
            st.sidebar.error("Failed to load dictionary.")
else:
    if st.sidebar.button("Load dictionary"):
        with st.spinner("Loading NLTK words…"):
            sc.load_dictionary(load_nltk_words())

st.sidebar.write(f"**Words loaded:** {len(sc.dictionary)}")
st.sidebar.write(f"**Cached suggestions:** {len(sc.cache)}")

new_word = st.sidebar.text_input("Add word to dictionary")
if new_word and st.sidebar.button("Add word"):
    if sc.add_word(new_word):
        st.sidebar.success("Word added successfully.")
    else:
        st.sidebar.info("Word already exists in the dictionary.")

if st.sidebar.button("Purge cache"):
    removed = sc.purge_cache()
    st.sidebar.success(f"Cache purged ({removed} entries).")

st.title("Spell Checker (Levenshtein Distance)")

if not len(sc.dictionary):
    st.info("Please load a dictionary first.")
    st.stop()

check_tab, correct_tab = st.tabs(["Check spelling", "Correct text"])

with check_tab:
    text = st.text_area("Text to spell check:", "")
    if text:
        report = sc.report(text)

        st.subheader("Results")
        st.code(format_report(report), language=None)
        if report.uncorrected:
            st.warning(f"No suggestion within distance {sc.max_distance}: {', '.join(report.uncorrected)}")

        st.subheader("Top Candidates")
        for word in dict.fromkeys(report.misspelled):
            ranked = sc.candidates(word, k=5)
            if ranked:
                st.write(f"**{word}**: " + ", ".join(f"{cand} (distance {dist})" for cand, dist in ranked))

with correct_tab:
    upload = st.file_uploader("Text file to correct", type=["txt"])
    source_text = upload.getvalue().decode("utf-8", errors="ignore") if upload is not None else ""
    source_text = st.text_area("Text to correct:", source_text)

    if source_text:
        selections = []
        for i, token in enumerate(tokenize(source_text)):
            candidates = candidates_for(token, sc)
            if not candidates:
                continue
            options = ["0: Skip (make no change)"] + [f"{n}: {c}" for n, c in enumerate(candidates, 1)]
            picked = st.selectbox(f"Misspelled word: {token}", options, key=f"fix-{i}")
            selections.append(options.index(picked))

        chosen = iter(selections)
        result = correct_text(source_text, sc, lambda token, candidates: next(chosen))

        if result.changed:
            st.success(f"Applied {len(result.applied)} correction(s).")
            st.text_area("Corrected text", result.text, height=200)
            st.download_button("Download corrected text", result.text, file_name="corrected.txt")
        else:
            st.write("No corrections were made.")
