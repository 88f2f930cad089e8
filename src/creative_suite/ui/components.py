"""Reusable UI components for the Creative Suite Gradio interface."""

from typing import Any, Callable

import gradio as gr

from .handlers import export_handler, finish_loading, start_loading


class ActionBar:
    """Generate button, status line and download controls for one tool.

    Every tool has the same action area:
    - Generate button (disabled while a request is in flight)
    - Status/error Markdown (one message, replaced on each attempt)
    - Save button that exports the held result(s)
    - File component listing the exported download(s)
    """

    def __init__(self, generate_label: str, save_label: str):
        """Build the components inside the current Gradio layout context.

        Args:
            generate_label: Text on the generate button
            save_label: Text on the save/export button
        """
        self.generate_btn = gr.Button(generate_label, variant="primary")
        self.status = gr.Markdown(value="")
        self.save_btn = gr.Button(save_label, variant="secondary", size="sm")
        self.download = gr.File(label="Download", visible=False, interactive=False)

    def wire(
        self,
        fn: Callable[..., Any],
        inputs: list[gr.components.Component],
        result_output: gr.components.Component,
        controller_state: gr.State,
    ) -> None:
        """Connect the generate and save buttons.

        Generation runs as ``start_loading -> fn -> finish_loading`` so the
        button stays disabled for exactly as long as the request runs. ``fn``
        must return ``(result, status, download_update, controller)``.

        Args:
            fn: Async handler for this tool
            inputs: Input components, in ``fn`` argument order (without state)
            result_output: Component that shows the generated image(s)
            controller_state: Session controller state for this tool
        """
        self.generate_btn.click(
            fn=start_loading,
            inputs=None,
            outputs=[self.generate_btn, self.status],
        ).then(
            fn=fn,
            inputs=[*inputs, controller_state],
            outputs=[result_output, self.status, self.download, controller_state],
        ).then(
            fn=finish_loading,
            inputs=None,
            outputs=[self.generate_btn],
        )

        self.save_btn.click(
            fn=export_handler,
            inputs=[controller_state],
            outputs=[self.download, controller_state],
        )
