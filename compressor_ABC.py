from abc import ABC, abstractmethod
import io
from typing import BinaryIO, Callable, Tuple

from algorithms.errors import IOFailure


class Compressor(ABC):
    """
    Інтерфейс, що описує операції кодування та декодування даних
    з використанням різних алгоритмів.
    """

    @abstractmethod
    def compress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        """
        Читає всі байти з вхідного потоку, кодує їх і записує результат
        у вказаний вихідний потік.

        Args:
            input_stream: Вхідний потік для даних
            output_stream: Вихідний потік для запису закодованих даних

        Returns:
            Рядок з інформацією для логування
        """

    @abstractmethod
    def decompress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        """
        Читає закодовані байти з вхідного потоку, декодує їх і записує
        результат у вказаний вихідний потік.

        Args:
            input_stream: Вхідний потік для закодованих даних
            output_stream: Вихідний потік для запису декодованих даних

        Returns:
            Рядок з інформацією для логування
        """

    @classmethod
    def compress_bytes(cls, data: bytes) -> Tuple[bytes, str]:
        """
        Допоміжний метод для кодування байтів.

        Returns:
            Кортеж (закодовані дані, інформація про кодування)
        """
        compressor = cls()
        in_buffer = io.BytesIO(data)
        out_buffer = io.BytesIO()
        log_info = compressor.compress(in_buffer, out_buffer)
        return out_buffer.getvalue(), log_info

    @classmethod
    def decompress_bytes(cls, data: bytes) -> Tuple[bytes, str]:
        """
        Допоміжний метод для декодування байтів.

        Returns:
            Кортеж (декодовані дані, інформація про декодування)
        """
        compressor = cls()
        in_buffer = io.BytesIO(data)
        out_buffer = io.BytesIO()
        log_info = compressor.decompress(in_buffer, out_buffer)
        return out_buffer.getvalue(), log_info

    @classmethod
    def compress_file(cls, input_file: str, output_file: str) -> str:
        """
        Кодує весь вміст input_file і записує результат у output_file.

        Raises:
            IOFailure: якщо файл не вдалося прочитати або записати
        """
        return _transform_file(cls.compress_bytes, input_file, output_file)

    @classmethod
    def decompress_file(cls, input_file: str, output_file: str) -> str:
        """
        Декодує весь вміст input_file і записує результат у output_file.

        Raises:
            IOFailure: якщо файл не вдалося прочитати або записати
            MalformedInput: якщо вміст файлу не є коректним кодом
        """
        return _transform_file(cls.decompress_bytes, input_file, output_file)


def _transform_file(
    transform: Callable[[bytes], Tuple[bytes, str]], input_file: str, output_file: str
) -> str:
    # Весь файл читається в пам'ять до створення вихідного файлу,
    # тож некоректні дані не залишають після себе порожній результат.
    try:
        with open(input_file, "rb") as in_file:
            data = in_file.read()
    except OSError as e:
        raise IOFailure(f"Cannot read {input_file}: {e.strerror or e}", input_file) from e

    result, log_info = transform(data)

    try:
        with open(output_file, "wb") as out_file:
            out_file.write(result)
    except OSError as e:
        raise IOFailure(f"Cannot write {output_file}: {e.strerror or e}", output_file) from e

    return log_info
