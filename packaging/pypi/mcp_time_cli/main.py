import os
import sys
import platform
import subprocess
import importlib.util

PROJECT_NAME = "mcp-time"
ISSUE_URL = "https://github.com/TheoBrigitte/mcp-time/issues/new"
OS_MAPPING = {
    'windows': 'win32',
}
ARCH_MAPPING = {
    'x86_64': 'x64',
    'amd64': 'x64',
    'aarch64': 'arm64',
}
# Lookup table for all platforms and binary distribution packages
BINARY_DISTRIBUTION_PACKAGES = {
    'linux-x64': f"{PROJECT_NAME}-linux-x64",
    'linux-arm64': f"{PROJECT_NAME}-linux-arm64",
    'darwin-x64': f"{PROJECT_NAME}-darwin-x64",
    'darwin-arm64': f"{PROJECT_NAME}-darwin-arm64",
    'win32-x64': f"{PROJECT_NAME}-win32-x64",
}


def current_platform():
    os_name = platform.system().lower()
    os_name = OS_MAPPING.get(os_name, os_name)
    arch = platform.machine().lower()
    arch = ARCH_MAPPING.get(arch, arch)
    return os_name, arch


def binary_name(os_name):
    ext = os_name == "win32" and ".exe" or ""
    return PROJECT_NAME + ext


def package_binary(package_name, name):
    """Return bin/<name> from the installed platform package, or None.

    The package is located without being imported; a distribution called
    mcp-time-linux-x64 provides the import package mcp_time_linux_x64.
    """
    if not package_name:
        return None
    try:
        spec = importlib.util.find_spec(package_name.replace("-", "_"))
    except (ImportError, ValueError):
        return None
    if spec is None or not spec.submodule_search_locations:
        return None
    for location in spec.submodule_search_locations:
        candidate = os.path.join(location, "bin", name)
        if os.path.isfile(candidate):
            return os.path.abspath(candidate)
    return None


def get_binary_path(os_name=None, arch=None):
    if os_name is None or arch is None:
        detected_os, detected_arch = current_platform()
        os_name = os_name or detected_os
        arch = arch or detected_arch
    name = binary_name(os_name)
    package_name = BINARY_DISTRIBUTION_PACKAGES.get(f"{os_name}-{arch}")

    executable = package_binary(package_name, name)
    if executable is None:
        # Binary placed next to the launcher by the install step
        executable = os.path.join(os.path.dirname(os.path.abspath(__file__)), name)
    return executable


def run_binary(*args):
    """Run the platform binary with args, inheriting stdio.

    Raises subprocess.CalledProcessError when the binary exits non-zero or is
    killed by a signal, and OSError when it cannot be executed. Ctrl-C reaches
    the binary through the process group, so the launcher keeps waiting for it
    to shut down instead of killing it.
    """
    with subprocess.Popen([get_binary_path(), *args]) as process:
        while True:
            try:
                returncode = process.wait()
                break
            except KeyboardInterrupt:
                continue
    if returncode:
        raise subprocess.CalledProcessError(returncode, process.args)
    return subprocess.CompletedProcess(process.args, returncode)


def main():
    try:
        run_binary(*sys.argv[1:])
    except subprocess.CalledProcessError as e:
        if e.returncode < 0:
            return 128 - e.returncode
        return e.returncode
    except OSError as e:
        print(f"Couldn't execute binary {e.filename}: {e.strerror}. Please create an issue: {ISSUE_URL}", file=sys.stderr)
        return 1
    return 0
