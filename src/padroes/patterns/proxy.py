"""
Padrão Proxy
Substitutos que controlam o acesso a um serviço de vídeo remoto
"""
import time
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional


class ServicoDeVideo(ABC):
    """Interface Subject"""

    @abstractmethod
    def listar_videos(self) -> List[str]:
        pass

    @abstractmethod
    def obter_info(self, video_id: str) -> Dict[str, str]:
        pass

    @abstractmethod
    def baixar_video(self, video_id: str) -> str:
        pass


class ServicoDeVideoRemoto(ServicoDeVideo):
    """Real Subject - Toda chamada simula uma ida à rede"""

    def __init__(self, atraso: float = 0.0):
        self._atraso = atraso
        self._videos = {
            "v1": "Introdução aos Padrões",
            "v2": "Proxy na Prática",
            "v3": "Decorator vs Proxy",
        }
        self.chamadas = 0

    def _conectar(self, operacao: str):
        self.chamadas += 1
        print(f"[Remoto] {operacao} (chamada {self.chamadas})")
        if self._atraso:
            time.sleep(self._atraso)

    def listar_videos(self) -> List[str]:
        self._conectar("Listando vídeos")
        return list(self._videos)

    def obter_info(self, video_id: str) -> Dict[str, str]:
        self._conectar(f"Buscando informações de {video_id}")
        if video_id not in self._videos:
            raise KeyError(f"Vídeo não encontrado: {video_id}")
        return {"id": video_id, "titulo": self._videos[video_id]}

    def baixar_video(self, video_id: str) -> str:
        self._conectar(f"Baixando {video_id}")
        if video_id not in self._videos:
            raise KeyError(f"Vídeo não encontrado: {video_id}")
        return f"conteudo-{video_id}"


class ProxyComCache(ServicoDeVideo):
    """Proxy de cache: repete respostas sem consultar o serviço real"""

    def __init__(self, servico: ServicoDeVideo):
        self._servico = servico
        self._lista: Optional[List[str]] = None
        self._infos: Dict[str, Dict[str, str]] = {}
        self._downloads: Dict[str, str] = {}

    def listar_videos(self) -> List[str]:
        if self._lista is None:
            self._lista = self._servico.listar_videos()
        else:
            print("[Cache] Lista de vídeos vinda do cache")
        return list(self._lista)

    def obter_info(self, video_id: str) -> Dict[str, str]:
        if video_id not in self._infos:
            self._infos[video_id] = self._servico.obter_info(video_id)
        else:
            print(f"[Cache] Informações de {video_id} vindas do cache")
        return dict(self._infos[video_id])

    def baixar_video(self, video_id: str) -> str:
        if video_id not in self._downloads:
            self._downloads[video_id] = self._servico.baixar_video(video_id)
        else:
            print(f"[Cache] Vídeo {video_id} já baixado")
        return self._downloads[video_id]

    def resetar(self):
        self._lista = None
        self._infos.clear()
        self._downloads.clear()


class ProxyDeProtecao(ServicoDeVideo):
    """Proxy de proteção: só usuários autorizados chegam ao serviço"""

    def __init__(self, servico: ServicoDeVideo, usuario: str, autorizados: Iterable[str]):
        self._servico = servico
        self._usuario = usuario
        self._autorizados = set(autorizados)

    def _verificar_acesso(self):
        if self._usuario not in self._autorizados:
            print(f"[Proteção] Acesso negado para {self._usuario}")
            raise PermissionError(f"Acesso negado para {self._usuario}")

    def listar_videos(self) -> List[str]:
        self._verificar_acesso()
        return self._servico.listar_videos()

    def obter_info(self, video_id: str) -> Dict[str, str]:
        self._verificar_acesso()
        return self._servico.obter_info(video_id)

    def baixar_video(self, video_id: str) -> str:
        self._verificar_acesso()
        return self._servico.baixar_video(video_id)


class GerenciadorDeVideos:
    """Cliente - Não sabe se está falando com o serviço real ou com um proxy"""

    def __init__(self, servico: ServicoDeVideo):
        self._servico = servico

    def renderizar_pagina(self, video_id: str) -> str:
        info = self._servico.obter_info(video_id)
        return f"Página do vídeo '{info['titulo']}'"

    def renderizar_lista(self) -> List[str]:
        return self._servico.listar_videos()

    def reagir_a_usuario(self, video_id: str):
        self.renderizar_pagina(video_id)
        self.renderizar_lista()


def demonstrar():
    remoto = ServicoDeVideoRemoto()
    gerenciador = GerenciadorDeVideos(ProxyComCache(remoto))
    gerenciador.reagir_a_usuario("v1")
    gerenciador.reagir_a_usuario("v1")
    gerenciador.reagir_a_usuario("v2")
    print(f"[Cliente] Chamadas ao serviço remoto: {remoto.chamadas}")

    protegido = GerenciadorDeVideos(ProxyDeProtecao(remoto, "visitante", autorizados=["admin"]))
    try:
        protegido.renderizar_lista()
    except PermissionError as e:
        print(f"[Cliente] {e}")
