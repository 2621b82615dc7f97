"""
Package des implémentations spécifiques par plateforme

Chaque module fournit une variante de OperatingSystem et de
HardwareAbstractionLayer :
- Windows (registre)
- Linux (procfs, sysfs)
- macOS (sysctl, sw_vers, system_profiler)
- Solaris (psrinfo, smbios)
- FreeBSD (sysctl, kenv)
"""
