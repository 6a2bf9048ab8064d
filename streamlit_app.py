import sys
import warnings

import numpy as np
import pandas as pd
import streamlit as st
from loguru import logger

from rbf_approx import DEFAULT_EPSILON, Kernel, NumericalInstabilityWarning, fit
from rbf_approx.sine import DEFAULT_KERNEL, SWEEP_PARAMS, run_sweeps, sine_samples

logger.remove()
logger.add(sys.stderr, level="INFO", format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}")
logger.enable("rbf_approx")

st.set_page_config(page_title="RBF Sine Approximation", layout="wide")

KERNEL_NAMES = [k.value for k in Kernel]


# ============== MODELS ==============

@st.cache_data
def fit_sine(kernel_name, epsilon, n_train):
    train = sine_samples(n_train, even_spaced=True)
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", NumericalInstabilityWarning)
        model = fit(train, kernel_name, epsilon)
    unstable = any(issubclass(w.category, NumericalInstabilityWarning) for w in caught)
    xs = np.linspace(0.0, 1.0, 200)
    curve = pd.DataFrame({
        "x": xs,
        "sin(x)": np.sin(xs),
        "RBF": model.predict(xs),
    }).set_index("x")
    return curve, model.params, unstable


@st.cache_data
def sweep(kernel_name, epsilon, params, seed):
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", NumericalInstabilityWarning)
        results = run_sweeps(params, kernel=kernel_name, epsilon=epsilon, rng=seed)
    return {f"train {lo}..{hi}, test {n}": df for (lo, hi, n), df in results.items()}


# ============== SIDEBAR ==============

with st.sidebar:
    st.subheader("Kernel")
    kernel_name = st.selectbox("Kernel", KERNEL_NAMES, index=KERNEL_NAMES.index(DEFAULT_KERNEL.value))
    epsilon = st.number_input("Shape parameter (epsilon)", min_value=1e-4, value=DEFAULT_EPSILON,
                              step=0.01, format="%.4f")

tab_fit, tab_sweep = st.tabs(["Fit", "Error Sweep"])


# ============== TAB 1: FIT ==============
with tab_fit:
    st.title("RBF Fit of sin(x)")
    n_train = st.slider("Training samples", min_value=2, max_value=200, value=25)

    curve, params, unstable = fit_sine(kernel_name, epsilon, n_train)
    if unstable:
        st.warning("Kernel matrix is singular or ill-conditioned; weights are a least-squares fit.")
    st.line_chart(curve)
    st.json(params)


# ============== TAB 2: ERROR SWEEP ==============
with tab_sweep:
    st.title("Error Sum vs Training Samples")
    st.caption("Training points are evenly spaced on [0, 1); test points are random.")

    seed = st.number_input("Random seed", min_value=0, value=0, step=1)
    if st.button("Run Sweeps", type="primary", use_container_width=True):
        with st.spinner("Sweeping..."):
            st.session_state.sweep_result = sweep(kernel_name, epsilon, tuple(SWEEP_PARAMS), int(seed))

    if "sweep_result" in st.session_state and st.session_state.sweep_result:
        for label, df in st.session_state.sweep_result.items():
            st.subheader(label)
            st.line_chart(df.set_index("train_samples")["error_sum"],
                          x_label="training samples", y_label="error sum")
    else:
        st.info("Pick a kernel and click Run Sweeps.")
