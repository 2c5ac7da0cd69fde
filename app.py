import logging

import gradio as gr

from json_csv_flattener.handlers import (
    build_table_previews,
    export_csv_handler,
    flatten_pasted_json,
    load_and_flatten_json,
    reflatten_handler,
)
from json_csv_flattener.logging_setup import configure_logging
from json_csv_flattener.tables import RowPolicy

configure_logging(logging.INFO)

# --- UI Definition ---
with gr.Blocks(title="JSON Array Flattener") as demo:
    gr.Markdown("# JSON Array Flattener")
    gr.Markdown("Upload a JSON file and get one comma-separated block per array it contains.")

    # State
    json_data_state = gr.State()

    with gr.Row():
        # Left Panel: Input & Options
        with gr.Column(scale=1):
            gr.Markdown("### 1. Import")
            file_input = gr.File(label="Upload JSON File", file_types=[".json"])
            pasted_json = gr.Code(label="...or paste JSON", language="json")
            parse_btn = gr.Button("Flatten pasted JSON")
            status_msg = gr.Textbox(label="Status", interactive=False)

            gr.Markdown("### 2. Options")
            row_policy = gr.Radio(
                choices=[policy.value for policy in RowPolicy],
                value=RowPolicy.DROP_RAGGED_ROW.value,
                label="Ragged rows",
                info="Drop rows that some columns have no value for, or pad them with empty cells.",
            )
            line_ending = gr.Radio(choices=["crlf", "lf"], value="crlf", label="Line Ending")
            shorten_labels = gr.Checkbox(label="Shorten table labels", value=False)

        # Right Panel: Output
        with gr.Column(scale=2):
            gr.Markdown("### 3. Tables")
            table_count = gr.Textbox(label="Table Count", interactive=False)

            @gr.render(inputs=[json_data_state, row_policy, shorten_labels])
            def render_tables(data, policy, shorten):
                if data is None:
                    gr.Markdown("No data loaded.")
                    return

                for label, headers, rows in build_table_previews(data, policy, shorten):
                    with gr.Accordion(label, open=False):
                        gr.Dataframe(
                            headers=headers,
                            value=rows,
                            datatype=["str"] * len(headers),
                            interactive=False,
                            label=f"{label} (first rows)",
                        )

            gr.Markdown("### 4. Export")
            csv_output = gr.Textbox(label="Flattened Output", lines=12, interactive=False)
            output_filename = gr.Textbox(label="Output Filename (optional)", placeholder="output")
            export_btn = gr.Button("Export CSV", variant="primary")
            download_output = gr.File(label="Download Result")

    option_inputs = [row_policy, line_ending, shorten_labels]

    file_input.upload(
        fn=load_and_flatten_json,
        inputs=[file_input] + option_inputs,
        outputs=[json_data_state, status_msg, csv_output, table_count],
    )

    parse_btn.click(
        fn=flatten_pasted_json,
        inputs=[pasted_json] + option_inputs,
        outputs=[json_data_state, status_msg, csv_output, table_count],
    )

    for option in option_inputs:
        option.change(
            fn=reflatten_handler,
            inputs=[json_data_state] + option_inputs,
            outputs=[csv_output, table_count],
        )

    export_btn.click(
        fn=export_csv_handler,
        inputs=[csv_output, output_filename],
        outputs=[download_output, status_msg],
    )

if __name__ == "__main__":
    demo.launch()
