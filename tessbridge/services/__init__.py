from .ocr import get_tesseract_version, get_tesseract_langs, image_to_string
