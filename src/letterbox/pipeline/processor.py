from letterbox.file_io import save_jpeg
from letterbox.letterbox import letterbox, load_image
from letterbox.logger import create_logger
from letterbox.pipeline.request import ImageTask
from letterbox.skip import destination_path


def convert(task: ImageTask):
    """Decode, letterbox and write one image to the output directory."""
    log = create_logger(task.path)
    opts = task.options

    src = load_image(task.path)
    log.debug(f"Decoded {src.size[0]}x{src.size[1]} {src.mode}")

    dst = letterbox(src, opts.white, opts.ratio)
    save_jpeg(dst, destination_path(opts.output_dir, task.path), logger=log)
