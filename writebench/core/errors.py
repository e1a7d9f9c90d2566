"""Fatal benchmark errors and their process exit statuses."""

import errno


class BenchmarkError(Exception):
    """Base class for errors that abort a benchmark run."""

    exit_code = -errno.EINVAL


class InvalidArgumentError(BenchmarkError):
    """Missing or unusable target path, or an invalid size/count."""

    exit_code = -errno.EINVAL


class OutOfMemoryError(BenchmarkError):
    """The write buffer or the sample list could not be allocated."""

    exit_code = -errno.ENOMEM


class WriteError(BenchmarkError):
    """A write call failed or transferred fewer bytes than requested."""

    exit_code = -errno.EIO
