"""Workspace definition models."""

from typing import List, Optional

from pydantic import BaseModel, Field


class Ssh(BaseModel):
    """SSH connection options for a remote workspace."""

    host: str
    user: Optional[str] = None
    port: Optional[int] = Field(default=None, ge=1, le=65535)
    identity_file: Optional[str] = None
    command: Optional[str] = None  # Defaults to `ssh`

    def ssh_command(self) -> str:
        return self.command or "ssh"

    def ssh_args(self) -> List[str]:
        """Options for the ssh command followed by the destination host.

        Returns:
            Argument list, e.g. ``["-l", "me", "-p", "2222", "host"]``
        """
        args = []
        if self.user:
            args.extend(["-l", self.user])
        if self.port is not None:
            args.extend(["-p", str(self.port)])
        if self.identity_file:
            args.extend(["-i", self.identity_file])
        args.append(self.host)
        return args


class Editor(BaseModel):
    command: str


class Shell(BaseModel):
    command: str


class Workspace(BaseModel):
    """A named workspace definition.

    The name is never stored in the workspace file. It is the file's path
    relative to the workspace directory and is filled in by the store after
    the body has been decoded.
    """

    name: str = Field(default="", exclude=True)
    dir: str
    ssh: Optional[Ssh] = None
    editor: Optional[Editor] = None
    shell: Optional[Shell] = None

    @property
    def is_remote(self) -> bool:
        return self.ssh is not None

    def to_body(self) -> dict:
        """Serializable body of the workspace file (name omitted)."""
        return self.model_dump(mode="json", exclude_none=True)


__all__ = ["Workspace", "Ssh", "Editor", "Shell"]
