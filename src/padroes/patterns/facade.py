"""
Padrão Facade
Uma interface simples para um subsistema complexo de conversão de vídeo
"""
from dataclasses import dataclass


# Subsistema

class ArquivoDeVideo:
    def __init__(self, nome: str):
        self.nome = nome
        self.tipo_codec = nome.rsplit(".", 1)[-1].lower() if "." in nome else ""


class Codec:
    tipo = ""


class CodecOgg(Codec):
    tipo = "ogg"


class CodecMPEG4(Codec):
    tipo = "mp4"


class FabricaDeCodecs:
    @staticmethod
    def extrair(arquivo: ArquivoDeVideo) -> Codec:
        print(f"[Codec] Lendo codec do arquivo {arquivo.nome}")
        if arquivo.tipo_codec == "mp4":
            return CodecMPEG4()
        return CodecOgg()


class LeitorDeBitrate:
    @staticmethod
    def ler(arquivo: ArquivoDeVideo, codec: Codec) -> str:
        print(f"[Bitrate] Lendo arquivo com codec {codec.tipo}")
        return f"buffer:{arquivo.nome}"

    @staticmethod
    def converter(buffer: str, codec: Codec) -> str:
        print(f"[Bitrate] Convertendo para {codec.tipo}")
        return f"{buffer}->{codec.tipo}"


class MixadorDeAudio:
    def corrigir(self, resultado: str) -> str:
        print("[Áudio] Corrigindo áudio")
        return f"{resultado}+audio"


@dataclass
class ArquivoConvertido:
    nome: str
    formato: str
    conteudo: str


class ConversorDeVideo:
    """Facade - O cliente chama um único método"""

    formatos = {"mp4": CodecMPEG4, "ogg": CodecOgg}

    def converter(self, nome_arquivo: str, formato: str) -> ArquivoConvertido:
        codec_destino_class = self.formatos.get(formato.lower())
        if codec_destino_class is None:
            raise ValueError(f"Formato inválido: {formato}. Formatos válidos: {list(self.formatos)}")

        print(f"[Conversor] Iniciando conversão de {nome_arquivo}")
        arquivo = ArquivoDeVideo(nome_arquivo)
        codec_origem = FabricaDeCodecs.extrair(arquivo)
        codec_destino = codec_destino_class()

        buffer = LeitorDeBitrate.ler(arquivo, codec_origem)
        resultado = LeitorDeBitrate.converter(buffer, codec_destino)
        resultado = MixadorDeAudio().corrigir(resultado)

        base = nome_arquivo.rsplit(".", 1)[0]
        print("[Conversor] Conversão concluída")
        return ArquivoConvertido(f"{base}.{codec_destino.tipo}", codec_destino.tipo, resultado)


def demonstrar():
    conversor = ConversorDeVideo()
    convertido = conversor.converter("gatinhos.ogg", "mp4")
    print(f"[Cliente] Arquivo gerado: {convertido.nome}")
