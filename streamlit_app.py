# streamlit_app.py
import streamlit as st
import requests, os

API_URL = os.getenv("API_URL", "http://localhost:8000")

st.title("DynamoDB Table Data")

st.markdown("Scan a DynamoDB table through the `/query` endpoint and show it as a table.")

table_name = st.text_input("tableName")
ref_id = st.text_input("refId", value="A")

if st.button("Query"):
    if not table_name:
        st.error("Please enter a table name")
    else:
        body = {"queries": [{"refId": ref_id or "A", "tableName": table_name}]}
        resp = requests.post(f"{API_URL}/query", json=body)
        if resp.status_code != 200:
            st.error(f"{resp.status_code}: {resp.text}")
        else:
            result = resp.json()["results"].get(ref_id or "A", {})
            if result.get("error"):
                st.error(result["error"])
            for frame in result.get("frames", []):
                fields = frame["schema"]["fields"]
                values = frame["data"]["values"]
                st.subheader(frame["schema"]["name"])
                st.caption(", ".join(f'{f["name"]} ({f["labels"].get("kind", "")})' for f in fields))
                # columnar -> one dict per column for st.dataframe
                st.dataframe({f["name"]: v for f, v in zip(fields, values)})

st.markdown("Credentials come from the service environment (`AWS_ACCESS_KEY_ID`, `AWS_SECRET_ACCESS_KEY`).")
