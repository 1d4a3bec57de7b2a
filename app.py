from __future__ import annotations
import logging
import streamlit as st

from config import ClipperSettings
from clipper import extract_url_from_text, fetch_and_parse_product, resolve_site_key

logging.basicConfig(level=logging.INFO)

st.set_page_config(page_title="Web Clipper", layout="centered")
st.title("Ajouter un produit depuis un lien")
st.caption("Flux: lien produit -> relais -> extraction (site connu / JSON-LD / meta) -> fiche pre-remplie")

settings = ClipperSettings.from_env()

with st.sidebar:
    st.header("Relais")
    for relay in settings.relays:
        st.code(relay, language=None)
    st.caption(f"Timeout par relais: {settings.timeout:g}s")

shared = st.text_area("Lien ou texte partage", placeholder="https://www.exemple.fr/produit/123")

if "clip" not in st.session_state:
    st.session_state["clip"] = None

if st.button("Recuperer le produit", type="primary"):
    url = extract_url_from_text(shared) or shared.strip()
    site = resolve_site_key(url) if url else None
    with st.spinner(f"Extraction en cours ({site or 'site generique'})..."):
        st.session_state["clip"] = fetch_and_parse_product(url, settings=settings)

outcome = st.session_state["clip"]
if outcome is not None:
    if not outcome.ok:
        st.error(outcome.reason)
    else:
        product = outcome.product
        col1, col2 = st.columns([1, 2])
        with col1:
            if product.image_url:
                st.image(product.image_url, use_container_width=True)
        with col2:
            st.subheader(product.name)
            if product.price is not None:
                st.metric("Prix", f"{product.price:.2f} €")
            else:
                st.warning("Prix introuvable, a completer manuellement.")
            st.write(product.description)
            st.caption(f"Source: {product.source}")
        st.json(product.to_dict())
