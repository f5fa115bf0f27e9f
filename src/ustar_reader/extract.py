"""Functional extraction API."""

import asyncio
import functools
from typing import Optional

from .core.extractor import ArchiveExtractor
from .core.types import ExtractConfig
from .exceptions import FileError
from .tar.models import Archive
from .tar.stream import DEFAULT_BUFFER_SIZE


def open_archive(path: str) -> Archive:
    """디스크에 있는 tar 아카이브를 가리키는 Archive 객체를 생성합니다.

    Args:
        path: tar 파일 경로 (예: "/tmp/backup.tar", "./samples/sample1.tar")

    Returns:
        Archive: extract()에 전달할 아카이브 핸들

    Examples:
        archive = open_archive("backup.tar")
        extract(archive, "/tmp/restore")
    """
    return Archive(path=str(path))


def extract(
    archive: Archive,
    destination: Optional[str] = None,
    buffer_size: int = DEFAULT_BUFFER_SIZE,
) -> Archive:
    """tar 아카이브의 모든 항목을 대상 디렉토리에 추출합니다.

    Args:
        archive: 추출할 아카이브 (경로 또는 열린 바이너리 스트림)
        destination: 추출 대상 루트 디렉토리 (기본값: 현재 작업 디렉토리)
        buffer_size: 파일 내용을 읽는 청크 크기 (512의 배수, 기본값: 1 MiB)

    Returns:
        Archive: 체이닝을 위해 전달받은 아카이브를 그대로 반환

    Raises:
        FileError: 아카이브를 열거나 읽기/쓰기에 실패한 경우
        HeaderError: 체크섬이 맞지 않거나 PAX 헤더가 잘못된 경우
        ValueError: buffer_size가 512의 배수가 아닌 경우

    Examples:
        # 현재 디렉토리에 추출
        extract(open_archive("sample1.tar"))

        # 지정한 디렉토리에 추출
        extract(open_archive("sample3.tar"), "/tmp/output")
    """
    config = ExtractConfig(buffer_size=buffer_size)
    if destination is not None:
        config.destination = str(destination)

    if archive.fileobj is not None:
        ArchiveExtractor(archive.fileobj, config).run()
        return archive

    try:
        fileobj = open(archive.path, "rb")
    except OSError as e:
        raise FileError(f"Failed to open archive {archive.path}: {e}") from e

    with fileobj:
        ArchiveExtractor(fileobj, config).run()
    return archive


async def extract_async(
    archive: Archive,
    destination: Optional[str] = None,
    buffer_size: int = DEFAULT_BUFFER_SIZE,
) -> Archive:
    """extract()를 기본 executor에서 실행하는 비동기 버전입니다.

    Args:
        archive: 추출할 아카이브
        destination: 추출 대상 루트 디렉토리 (기본값: 현재 작업 디렉토리)
        buffer_size: 파일 내용을 읽는 청크 크기 (512의 배수)

    Returns:
        Archive: 전달받은 아카이브

    Raises:
        FileError: 입출력 실패 시
        HeaderError: 헤더 형식 오류 시

    Examples:
        archive = await extract_async(open_archive("sample2.tar"), "/tmp/output")
    """
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(
        None, functools.partial(extract, archive, destination, buffer_size)
    )
