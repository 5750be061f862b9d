"""Gradio web interface for PhotoFix."""

from __future__ import annotations

import atexit
import contextlib
import io
import logging
import mimetypes
import os
import sys
import tempfile
import traceback
from pathlib import Path
from typing import Any

from PIL import Image

from .config import Config
from .constants import LIFE_PHOTO_CAPTION_MAX_CHARS, PHOTO_PRESETS
from .fixer import fix
from .logging_config import setup_logging
from .text import check_text
from .validator import validate

logger = logging.getLogger("photofix.main")

# Optional Gradio import
try:
    import gradio as gr

    HAS_GRADIO = True
except ImportError:
    HAS_GRADIO = False
    logger.error("Gradio not installed. Run: pip install gradio")

# Fixed downloads from every session; removed at interpreter exit
_temp_files: list[str] = []


def _cleanup_temp_files() -> None:
    """Clean up temporary files."""
    for f in _temp_files:
        with contextlib.suppress(OSError):
            os.unlink(f)
    _temp_files.clear()


atexit.register(_cleanup_temp_files)


def _read_upload(file_path: str) -> tuple[bytes, str | None]:
    mime_type, _ = mimetypes.guess_type(file_path)
    return Path(file_path).read_bytes(), mime_type


def check_upload(file_path: str | None, preset: str) -> tuple[dict[str, Any] | None, str]:
    """Validate an uploaded photo against the selected preset."""
    if file_path is None:
        return None, "Please upload a photo"
    if preset not in PHOTO_PRESETS:
        return None, f"Unknown preset: {preset}"

    expected_format, expected_size, need_transparent = PHOTO_PRESETS[preset]
    data, mime_type = _read_upload(file_path)
    verdict = validate(data, mime_type, expected_format, expected_size, need_transparent)

    if verdict.valid:
        status = "**Status:** Photo meets all requirements"
    elif verdict.can_auto_fix:
        status = "**Status:** " + "; ".join(verdict.errors) + " (auto-fix available)"
    else:
        status = "**Status:** " + "; ".join(verdict.errors)
    return verdict.to_dict(), status


def fix_upload(
    file_path: str | None, preset: str
) -> tuple[Image.Image | None, str | None, str]:
    """Auto-fix an uploaded photo and save the PNG for download."""
    if file_path is None:
        return None, None, "Please upload a photo"
    if preset not in PHOTO_PRESETS:
        return None, None, f"Unknown preset: {preset}"

    expected_format, expected_size, need_transparent = PHOTO_PRESETS[preset]
    data, _ = _read_upload(file_path)
    outcome = fix(data, expected_format, expected_size, need_transparent)

    if not outcome.success:
        return None, None, f"**Status:** {outcome.error}"

    stem = Path(file_path).stem
    with tempfile.NamedTemporaryFile(
        delete=False, prefix=f"fixed_{stem}_", suffix=".png"
    ) as tmp:
        tmp.write(outcome.output)
        fixed_path = tmp.name
        _temp_files.append(fixed_path)

    preview = Image.open(io.BytesIO(outcome.output))
    preview.load()
    return preview, fixed_path, "**Status:** Fixed photo ready for download"


def check_caption(text: str | None) -> str:
    """Validate a life-photo caption length."""
    verdict = check_text(text, LIFE_PHOTO_CAPTION_MAX_CHARS)
    counter = f"{verdict.char_count:g} / {verdict.max_chars} characters"
    if verdict.valid:
        return counter
    return f"{counter} - {'; '.join(verdict.errors)}"


def create_interface() -> object:
    """Create Gradio interface for PhotoFix."""
    with gr.Blocks(title="PhotoFix - Photo Requirement Checker") as interface:
        gr.Markdown(
            """
        # PhotoFix - Photo Requirement Checker

        1. **Upload** a photo and pick the profile it must satisfy
        2. **Check** format, size and background transparency
        3. **Auto-fix** to remove a plain background and pad to size
        4. **Download** the corrected PNG
        """
        )

        with gr.Row():
            with gr.Column(scale=1):
                file_input = gr.File(
                    label="Upload Photo",
                    file_types=["image"],
                    type="filepath",
                )
                preset = gr.Radio(
                    choices=list(PHOTO_PRESETS.keys()),
                    value=next(iter(PHOTO_PRESETS)),
                    label="Profile",
                )
                with gr.Row():
                    check_btn = gr.Button("Check", variant="primary")
                    fix_btn = gr.Button("Auto-fix")

                caption = gr.Textbox(label="Life Photo Caption", lines=2)
                caption_status = gr.Markdown()

            with gr.Column(scale=1):
                verdict_json = gr.JSON(label="Verdict")
                fixed_preview = gr.Image(label="Fixed Photo", type="pil", image_mode="RGBA")
                download = gr.File(label="Download PNG")
                status = gr.Markdown("**Status:** Ready")

        check_btn.click(check_upload, inputs=[file_input, preset], outputs=[verdict_json, status])
        fix_btn.click(
            fix_upload, inputs=[file_input, preset], outputs=[fixed_preview, download, status]
        )
        caption.change(check_caption, inputs=[caption], outputs=[caption_status])

    return interface


def main() -> None:
    """Main entry point."""
    setup_logging(os.environ.get("PHOTOFIX_LOG_LEVEL", "INFO"))

    if not HAS_GRADIO:
        logger.error("Gradio is required. Run: pip install gradio")
        sys.exit(1)

    logger.info("Starting web interface on %s:%d", Config.SERVER_NAME, Config.SERVER_PORT)

    try:
        interface = create_interface()
        interface.launch(
            server_name=Config.SERVER_NAME,
            server_port=Config.SERVER_PORT,
            share=False,
            show_error=True,
        )
    except Exception as e:
        logger.error("Failed to start: %s", e)
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
