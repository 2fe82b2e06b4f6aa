from handlers.ocr.pipeline import build_backend, run_ocr

__all__ = ["run_ocr", "build_backend"]
