"""Excel export functionality."""

from __future__ import annotations
from io import BytesIO
from datetime import datetime
from typing import List, Tuple, Any

import pandas as pd
import streamlit as st


SHEET_NAME = "Positions"


def build_excel(export_rows: List[Tuple[str, Any]]) -> bytes:
    """Write export rows to an in-memory .xlsx workbook."""
    buf = BytesIO()
    bd_rows = [
        {"Item": k, "Value": ("" if v in (None, "") else v)}
        for k, v in export_rows
    ]

    with pd.ExcelWriter(buf, engine="xlsxwriter") as xw:
        df = pd.DataFrame(bd_rows, columns=["Item", "Value"])
        df.to_excel(xw, index=False, sheet_name=SHEET_NAME)
        ws = xw.sheets[SHEET_NAME]
        ws.set_column(0, 0, 42)
        ws.set_column(1, 1, 22)

    return buf.getvalue()


def export_to_excel(export_rows: List[Tuple[str, Any]]) -> None:
    """Render Excel download button."""
    calc_id = datetime.now().strftime("%Y%m%d-%H%M%S")

    st.download_button(
        "Download Excel",
        data=build_excel(export_rows),
        file_name=f"stock_average_{calc_id}.xlsx",
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        use_container_width=True,
    )
