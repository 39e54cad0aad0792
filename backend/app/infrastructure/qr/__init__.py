from .qr_code_generator import generate_qr_code_data_url

__all__ = ["generate_qr_code_data_url"]
