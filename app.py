from __future__ import annotations

from dataclasses import replace

import streamlit as st

from keyphrase_eval.config import DEFAULT_MODELS, EvaluationOptions
from keyphrase_eval.ngrams import generate_ngrams
from keyphrase_eval.pipeline import run_evaluation
from keyphrase_eval.rake import extract_rake_phrases
from keyphrase_eval.report import format_report
from keyphrase_eval.text_utils import load_stopwords
from keyphrase_eval.tfidf import relative_position, term_frequency


st.set_page_config(page_title="Keyphrase Evaluation", layout="wide")

st.title("Keyphrase Evaluation")
st.write("Scores n-gram and RAKE keyphrases against reference keywords. Runs locally.")

with st.sidebar:
    st.header("Inputs")
    corpus_dir = st.text_input("Corpus directory", value="Training")
    stopwords_path = st.text_input("Stopword file", value="stopwords.txt")

    st.divider()
    st.subheader("Models")
    chosen = [m for m in DEFAULT_MODELS if st.checkbox(m.name, value=True)]

    st.divider()
    st.subheader("Scoring")
    top_k = st.slider("Keyphrases per document", 1, 20, 5, 1)
    pos_boost = st.number_input("POS boost factor", min_value=1.0, max_value=5.0, value=1.66, step=0.01)
    spacy_model = st.selectbox("spaCy model", ["en_core_web_sm", "en_core_web_md", "en_core_web_lg"], index=0)

tab_corpus, tab_doc = st.tabs(["Corpus evaluation", "Single document"])

with tab_corpus:
    if st.button("Run evaluation", disabled=not chosen):
        opts = replace(
            EvaluationOptions(),
            corpus_dir=corpus_dir,
            stopwords_path=stopwords_path,
            top_k=int(top_k),
            pos_boost=float(pos_boost),
            spacy_model=str(spacy_model),
            models=tuple(chosen),
        )
        with st.status("Evaluating…", expanded=True) as status:
            try:
                results = run_evaluation(opts)
            except (FileNotFoundError, RuntimeError, ValueError) as e:
                status.update(label="Failed", state="error")
                st.error(str(e))
                st.stop()
            status.update(label="Done", state="complete", expanded=False)

        st.dataframe(
            [
                {
                    "model": r.name,
                    "average": round(r.precision.average, 4),
                    "best": round(r.precision.best, 4),
                    "worst": round(r.precision.worst, 4),
                    "documents": len(r.precision.per_document),
                }
                for r in results
            ],
            use_container_width=True,
        )

        report = format_report(results)
        st.code(report)
        st.download_button("Download report", data=report.encode("utf-8"), file_name="report.txt")

with tab_doc:
    text = st.text_area("Document text", height=220)
    n = st.slider("N-gram order", 1, 3, 2, 1)
    if text.strip():
        try:
            stopwords = load_stopwords(stopwords_path)
        except FileNotFoundError as e:
            st.error(f"Stopword file not found: {e}")
            st.stop()

        col1, col2 = st.columns(2)
        with col1:
            st.subheader("RAKE")
            st.dataframe(
                [{"phrase": p.phrase, "score": round(p.score, 3)} for p in extract_rake_phrases(text, stopwords, top_k=int(top_k))],
                use_container_width=True,
            )
        with col2:
            st.subheader(f"{n}-gram candidates")
            candidates = generate_ngrams(text, int(n), stopwords)
            if candidates:
                st.caption("IDF needs a corpus; this shows the per-document factors only.")
                st.dataframe(
                    [
                        {
                            "phrase": p,
                            "tf": round(term_frequency(p, candidates), 3),
                            "relpos": round(relative_position(p, candidates), 3),
                        }
                        for p in dict.fromkeys(candidates)
                    ],
                    use_container_width=True,
                )
            else:
                st.info("No candidates of that order.")
