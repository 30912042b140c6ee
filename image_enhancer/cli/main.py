#!/usr/bin/env python3
"""
Main CLI entry point for the Image Enhancer
Classical sharpen and ONNX super-resolution modes
"""

import click

from .. import __version__
from ..core import get_logger, handle_error
from ..core.exceptions import ImageEnhancerError

# Configure Click
CONTEXT_SETTINGS = dict(
    help_option_names=['-h', '--help'],
    max_content_width=120
)


@click.group(context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(version=__version__, prog_name='Image Enhancer')
@click.option('--config', type=click.Path(exists=True, file_okay=False), help='Custom config directory')
@click.option('--verbose', is_flag=True, help='Enable verbose output')
@click.pass_context
def cli(ctx, config, verbose):
    """Image Enhancer - 2x upscaling with classical sharpening or an ONNX model

    The classical mode resizes with a Lanczos filter and applies a 3x3 sharpen
    kernel. The AI mode runs a super-resolution model on a fixed-size tile and
    resizes its output to twice the original dimensions.
    """
    ctx.ensure_object(dict)
    ctx.obj['config_dir'] = config
    ctx.obj['verbose'] = verbose

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.argument('input_path', type=click.Path(dir_okay=False))
@click.argument('output_path', type=click.Path(dir_okay=False))
@click.argument('intensity', type=float)
@click.pass_context
def sharpen(ctx, input_path, output_path, intensity):
    """Upscale 2x with Lanczos and sharpen

    Example: image-enhancer sharpen test.png renewed.png 1.5
    """
    try:
        from ..commands.enhance import EnhanceCommand

        cmd = EnhanceCommand(
            config_dir=ctx.obj.get('config_dir'),
            verbose=ctx.obj.get('verbose')
        )
        result = cmd.execute_classical(input_path, output_path, intensity)

        logger = get_logger()
        logger.info("Image processing complete!")
        logger.info(f"Saved to: {result['image_path']}")
        logger.info(f"Total time: {result['duration']:.1f} seconds")

    except ImageEnhancerError as e:
        handle_error(e, "Classical enhancement failed")
    except Exception as e:
        handle_error(e, "Unexpected error during classical enhancement")


@cli.command()
@click.argument('model_path', type=click.Path(dir_okay=False))
@click.argument('input_path', type=click.Path(dir_okay=False))
@click.argument('output_path', type=click.Path(dir_okay=False))
@click.option('--tile-size', type=click.IntRange(min=1), help='Model input tile size (default from config)')
@click.pass_context
def onnx(ctx, model_path, input_path, output_path, tile_size):
    """Enhance with an ONNX super-resolution model (CPU)

    Example: image-enhancer onnx model.onnx test.png renewed.png
    """
    try:
        from ..commands.enhance import EnhanceCommand

        cmd = EnhanceCommand(
            config_dir=ctx.obj.get('config_dir'),
            verbose=ctx.obj.get('verbose')
        )
        result = cmd.execute_ai(model_path, input_path, output_path, tile_size)

        logger = get_logger()
        logger.info("Image processing complete!")
        logger.info(f"Saved to: {result['image_path']}")
        logger.info(f"Total time: {result['duration']:.1f} seconds")

    except ImageEnhancerError as e:
        handle_error(e, "AI enhancement failed")
    except Exception as e:
        handle_error(e, "Unexpected error during AI enhancement")


@cli.command()
@click.option('--show', is_flag=True, help='Display current configuration')
@click.option('--validate', is_flag=True, help='Validate configuration')
@click.pass_context
def config(ctx, show, validate):
    """Inspect configuration

    Settings live in settings.yaml inside the config directory and control
    scale factors, tile size, execution providers and logging.
    """
    try:
        from ..commands.config import ConfigCommand

        cmd = ConfigCommand(
            config_dir=ctx.obj.get('config_dir'),
            verbose=ctx.obj.get('verbose')
        )

        if show:
            cmd.show_config()
        elif validate:
            cmd.validate_config()
        else:
            click.echo("Specify an action: --show or --validate")

    except ImageEnhancerError as e:
        handle_error(e, "Configuration operation failed")
    except Exception as e:
        handle_error(e, "Unexpected error in configuration")


def main():
    """Main entry point"""
    cli()


if __name__ == '__main__':
    main()
