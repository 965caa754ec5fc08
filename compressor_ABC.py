from abc import ABC, abstractmethod
import io
import os
from typing import BinaryIO, Tuple


class Compressor(ABC):
    """
    Interface describing file compression and decompression operations
    for a compression algorithm.
    """

    @abstractmethod
    def compress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        """
        Reads bytes from the input stream, compresses them and writes the
        compressed data to the output stream.

        Args:
            input_stream: Input stream with the data
            output_stream: Output stream for the compressed data

        Returns:
            A string with information for logging
        """
        pass

    @abstractmethod
    def decompress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        """
        Reads bytes from the compressed stream, decompresses them and writes
        the result to the output stream.

        Args:
            input_stream: Input stream with the compressed data
            output_stream: Output stream for the decompressed data

        Returns:
            A string with information for logging
        """
        pass

    @classmethod
    def compress_file(cls, input_file: str, output_file: str, **options) -> str:
        """
        Helper for compressing a file. A partially written output file is
        removed if compression fails.

        Args:
            input_file: Path to the input file
            output_file: Path to the output file
            **options: Passed to the compressor constructor

        Returns:
            Compression information
        """
        compressor = cls(**options)
        return cls._run_on_files(compressor.compress, input_file, output_file)

    @classmethod
    def decompress_file(cls, input_file: str, output_file: str, **options) -> str:
        """
        Helper for decompressing a file. A partially written output file is
        removed if decompression fails.

        Args:
            input_file: Path to the compressed file
            output_file: Path to the output file
            **options: Passed to the compressor constructor

        Returns:
            Decompression information
        """
        compressor = cls(**options)
        return cls._run_on_files(compressor.decompress, input_file, output_file)

    @staticmethod
    def _run_on_files(operation, input_file: str, output_file: str) -> str:
        with open(input_file, 'rb') as in_file, open(output_file, 'wb') as out_file:
            try:
                return operation(in_file, out_file)
            except Exception:
                # only the file this call created is removed
                out_file.close()
                os.remove(output_file)
                raise

    @classmethod
    def compress_bytes(cls, data: bytes, **options) -> Tuple[bytes, str]:
        """
        Helper for compressing bytes.

        Args:
            data: Input data to compress

        Returns:
            Tuple (compressed data, compression information)
        """
        compressor = cls(**options)
        in_buffer = io.BytesIO(data)
        out_buffer = io.BytesIO()
        log_info = compressor.compress(in_buffer, out_buffer)
        return out_buffer.getvalue(), log_info

    @classmethod
    def decompress_bytes(cls, data: bytes, **options) -> Tuple[bytes, str]:
        """
        Helper for decompressing bytes.

        Args:
            data: Compressed data

        Returns:
            Tuple (decompressed data, decompression information)
        """
        compressor = cls(**options)
        in_buffer = io.BytesIO(data)
        out_buffer = io.BytesIO()
        log_info = compressor.decompress(in_buffer, out_buffer)
        return out_buffer.getvalue(), log_info
